from .breach import BreachResult, check_breach, find_suffix, hash_password
from .debounce import Debouncer
from .gate import PasswordFieldMonitor
from .passwords import PasswordPolicy, validate_password
from .strength import StrengthResult, evaluate, strength_label

__all__ = [
    # Strength
    "StrengthResult",
    "evaluate",
    "strength_label",
    # Breach corpus
    "BreachResult",
    "check_breach",
    "hash_password",
    "find_suffix",
    # Caller side
    "Debouncer",
    "PasswordFieldMonitor",
    # Policy
    "PasswordPolicy",
    "validate_password",
]
