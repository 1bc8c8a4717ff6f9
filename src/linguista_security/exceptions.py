from __future__ import annotations

from typing import Iterable

NETWORK_UNAVAILABLE_MESSAGE = (
    "Could not perform security check. Please ensure you are connected to the internet."
)
UPSTREAM_UNAVAILABLE_MESSAGE = (
    "Security check is temporarily unavailable. Please try again in a moment."
)


class LinguistaSecurityError(Exception):
    """Base class for all errors raised by linguista-security."""


class BreachCheckError(LinguistaSecurityError):
    """The breach corpus could not be consulted.

    Callers must treat this as "unknown", never as "not breached".
    """

    default_message = UPSTREAM_UNAVAILABLE_MESSAGE

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class NetworkUnavailableError(BreachCheckError):
    """The range API could not be reached (DNS, timeout, connection reset)."""

    default_message = NETWORK_UNAVAILABLE_MESSAGE


class UpstreamUnavailableError(BreachCheckError):
    """The range API answered with a non-success status or an unreadable body."""

    default_message = UPSTREAM_UNAVAILABLE_MESSAGE


class PasswordValidationError(LinguistaSecurityError):
    def __init__(self, reasons: Iterable[str]):
        super().__init__("Password validation failed")
        self.reasons = list(reasons)


__all__ = [
    "LinguistaSecurityError",
    "BreachCheckError",
    "NetworkUnavailableError",
    "UpstreamUnavailableError",
    "PasswordValidationError",
    "NETWORK_UNAVAILABLE_MESSAGE",
    "UPSTREAM_UNAVAILABLE_MESSAGE",
]
