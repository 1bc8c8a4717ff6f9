"""
Breach corpus lookup over the Pwned Passwords range API (k-anonymity).

Only the first five hex characters of the SHA-1 digest leave the process;
the suffix is matched locally against the returned bucket.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass

import httpx

from linguista_security.exceptions import NetworkUnavailableError, UpstreamUnavailableError
from linguista_security.settings import SecuritySettings, get_security_settings

logger = logging.getLogger(__name__)

PREFIX_LENGTH = 5


@dataclass(frozen=True)
class BreachResult:
    is_leaked: bool
    count: int | None = None


def _to_utf8(password: str) -> bytes:
    # Surrogate pairs join into one code point; lone surrogates become U+FFFD
    text = password.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
    return text.encode("utf-8")


def hash_password(password: str) -> tuple[str, str]:
    """Return the ``(prefix, suffix)`` split of the uppercase SHA-1 hex digest."""
    digest = hashlib.sha1(_to_utf8(password)).hexdigest().upper()
    return digest[:PREFIX_LENGTH], digest[PREFIX_LENGTH:]


def find_suffix(body: str, suffix: str) -> int | None:
    """
    Scan a range response for ``suffix``.

    Returns the reported count, or None when the suffix is absent. Padding
    rows (count 0) never count as a hit.
    """
    wanted = suffix.upper()
    for line in body.splitlines():
        hash_suffix, sep, count = line.strip().partition(":")
        if not sep or hash_suffix.upper() != wanted:
            continue
        try:
            parsed = int(count)
        except ValueError as exc:
            raise UpstreamUnavailableError() from exc
        return parsed or None
    return None


def _headers(settings: SecuritySettings) -> dict[str, str]:
    headers = {"User-Agent": settings.user_agent}
    if settings.add_padding:
        headers["Add-Padding"] = "true"
    return headers


async def _fetch_range(client: httpx.AsyncClient, url: str, headers: dict[str, str], prefix: str) -> str:
    try:
        response = await client.get(url, headers=headers)
    except Exception as exc:
        logger.warning(
            "Range lookup failed: %s", type(exc).__name__, extra={"hash_prefix": prefix}
        )
        raise NetworkUnavailableError() from exc

    if not response.is_success:
        logger.warning(
            "Range lookup returned %s",
            response.status_code,
            extra={"hash_prefix": prefix, "status_code": response.status_code},
        )
        raise UpstreamUnavailableError()
    return response.text


async def check_breach(
    password: str,
    *,
    client: httpx.AsyncClient | None = None,
    settings: SecuritySettings | None = None,
) -> BreachResult:
    """
    Check whether ``password`` appears in the breach corpus.

    Issues exactly one GET per call, with no cache and no retry. Raises
    :class:`NetworkUnavailableError` when the request cannot be made and
    :class:`UpstreamUnavailableError` on a non-success status; a failed
    check is never reported as "not leaked".
    """
    settings = settings or get_security_settings()
    prefix, suffix = hash_password(password)
    url = f"{settings.range_api_url.rstrip('/')}/{prefix}"
    headers = _headers(settings)

    logger.debug("Checking breach corpus", extra={"hash_prefix": prefix})
    if client is None:
        async with httpx.AsyncClient(timeout=settings.request_timeout) as owned:
            body = await _fetch_range(owned, url, headers, prefix)
    else:
        body = await _fetch_range(client, url, headers, prefix)

    count = find_suffix(body, suffix)
    if count is None:
        return BreachResult(is_leaked=False)
    return BreachResult(is_leaked=True, count=count)


__all__ = ["BreachResult", "check_breach", "hash_password", "find_suffix"]
