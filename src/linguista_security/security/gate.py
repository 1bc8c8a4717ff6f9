"""
State holder for a sign-up password field.

Combines the synchronous strength score with a debounced breach lookup and
exposes a single ``can_submit`` verdict. Every input change bumps a token;
breach responses carrying an older token are dropped, so a slow stale
response can never overwrite the state of newer input.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from linguista_security.exceptions import BreachCheckError
from linguista_security.security.breach import BreachResult, check_breach
from linguista_security.security.debounce import Debouncer, SleepFn
from linguista_security.security.strength import StrengthResult, evaluate
from linguista_security.settings import SecuritySettings, get_security_settings

logger = logging.getLogger(__name__)

BreachFn = Callable[[str], Awaitable[BreachResult]]


class PasswordFieldMonitor:
    def __init__(
        self,
        *,
        checker: BreachFn = check_breach,
        settings: SecuritySettings | None = None,
        min_breach_length: int | None = None,
        delay: float | None = None,
        sleep: SleepFn = asyncio.sleep,
    ):
        settings = settings or get_security_settings()
        self.min_breach_length = (
            settings.min_breach_length if min_breach_length is None else min_breach_length
        )
        self._checker = checker
        self._debouncer = Debouncer(
            self._run_check,
            settings.debounce_seconds if delay is None else delay,
            sleep=sleep,
        )
        self._token = 0
        self._closed = False

        self.strength: StrengthResult = evaluate("")
        self.breach: BreachResult | None = None
        self.breach_error: str | None = None
        self.checking = False

    @property
    def pending(self) -> bool:
        return self._debouncer.pending

    @property
    def can_submit(self) -> bool:
        return (
            self.strength.is_strong
            and self.breach is not None
            and not self.breach.is_leaked
            and self.breach_error is None
            and not self.checking
            and not self.pending
        )

    def update(self, password: str) -> StrengthResult:
        if self._closed:
            raise RuntimeError("PasswordFieldMonitor is closed")
        self.strength = evaluate(password)

        self._token += 1
        self.breach = None
        self.breach_error = None
        self.checking = False

        if len(password) >= self.min_breach_length:
            self._debouncer.trigger(password, self._token)
        else:
            self._debouncer.cancel()
        return self.strength

    def clear(self) -> None:
        self.update("")

    async def aclose(self) -> None:
        self._closed = True
        self._token += 1
        self.checking = False
        await self._debouncer.aclose()

    async def __aenter__(self) -> "PasswordFieldMonitor":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _run_check(self, password: str, token: int) -> None:
        if token != self._token:
            return
        self.checking = True
        try:
            result = await self._checker(password)
        except BreachCheckError as exc:
            if token == self._token:
                self.breach_error = exc.message
            else:
                logger.debug("Discarding stale breach-check error")
            return
        finally:
            if token == self._token:
                self.checking = False

        if token != self._token:
            logger.debug("Discarding stale breach-check result")
            return
        self.breach = result


__all__ = ["PasswordFieldMonitor"]
