from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable

from linguista_security.exceptions import PasswordValidationError
from linguista_security.security.breach import BreachResult, check_breach
from linguista_security.security.strength import evaluate

BREACHED_REASON = "breached_password"


@dataclass
class PasswordPolicy:
    require_strong: bool = True
    forbid_breached: bool = True


async def validate_password(
    pw: str,
    policy: PasswordPolicy | None = None,
    *,
    breach_checker: Callable[[str], Awaitable[BreachResult]] | None = None,
) -> None:
    """
    Server-side counterpart of the sign-up gate.

    Raises :class:`PasswordValidationError` listing strength feedback and,
    when the corpus reports a leak, ``"breached_password"``. Breach-check
    errors propagate untouched; an unknown breach status is never accepted.
    """
    policy = policy or PasswordPolicy()
    reasons: list[str] = []

    if policy.require_strong:
        strength = evaluate(pw)
        if not strength.is_strong:
            reasons.extend(strength.feedback)

    if policy.forbid_breached:
        checker = breach_checker or check_breach
        result = await checker(pw)
        if result.is_leaked:
            reasons.append(BREACHED_REASON)

    if reasons:
        raise PasswordValidationError(reasons)


__all__ = ["PasswordPolicy", "validate_password", "BREACHED_REASON"]
