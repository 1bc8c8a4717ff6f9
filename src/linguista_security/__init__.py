from . import api, app, security

from .exceptions import (
    BreachCheckError,
    LinguistaSecurityError,
    NetworkUnavailableError,
    PasswordValidationError,
    UpstreamUnavailableError,
)
from .security import (
    BreachResult,
    Debouncer,
    PasswordFieldMonitor,
    PasswordPolicy,
    StrengthResult,
    check_breach,
    evaluate,
    hash_password,
    strength_label,
    validate_password,
)
from .settings import SecuritySettings, get_security_settings

__all__ = [
    # Modules
    "app",
    "api",
    "security",
    # Errors
    "LinguistaSecurityError",
    "BreachCheckError",
    "NetworkUnavailableError",
    "UpstreamUnavailableError",
    "PasswordValidationError",
    # Strength
    "StrengthResult",
    "evaluate",
    "strength_label",
    # Breach corpus
    "BreachResult",
    "check_breach",
    "hash_password",
    # Caller side
    "Debouncer",
    "PasswordFieldMonitor",
    # Policy
    "PasswordPolicy",
    "validate_password",
    # Settings
    "SecuritySettings",
    "get_security_settings",
]
