from .env import Env, get_env, pick
from .logging import JsonFormatter, setup_logging

__all__ = [
    "Env",
    "get_env",
    "pick",
    "JsonFormatter",
    "setup_logging",
]
