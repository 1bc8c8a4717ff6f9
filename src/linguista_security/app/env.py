from __future__ import annotations

import os
import warnings
from enum import StrEnum
from functools import cache


class Env(StrEnum):
    LOCAL = "local"
    DEV = "dev"
    TEST = "test"
    PROD = "prod"


_ALIASES: dict[str, Env] = {
    "development": Env.DEV,
    "staging": Env.DEV,
    "preview": Env.TEST,
    "ci": Env.TEST,
    "production": Env.PROD,
}


def normalize_env(raw: str | None) -> Env | None:
    key = (raw or "").strip().lower()
    if not key:
        return None
    try:
        return Env(key)
    except ValueError:
        return _ALIASES.get(key)


@cache
def get_env() -> Env:
    """Deployment environment from ``APP_ENV``; unknown or unset means local."""
    raw = os.getenv("APP_ENV")
    env = normalize_env(raw)
    if env is None and raw:
        warnings.warn(f"APP_ENV={raw!r} not recognised, using 'local'", RuntimeWarning, stacklevel=2)
    return env or Env.LOCAL


def pick(*, prod, nonprod, env: Env | None = None):
    """Return ``prod`` in production and ``nonprod`` everywhere else."""
    return prod if (env or get_env()) is Env.PROD else nonprod
