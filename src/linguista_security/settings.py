from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class SecuritySettings(BaseSettings):
    # flat = easy env overrides
    range_api_url: str = "https://api.pwnedpasswords.com/range"
    request_timeout: float = 5.0
    user_agent: str = "linguista-security"
    add_padding: bool = False

    # Caller-side policy for the sign-up form
    min_breach_length: int = 6
    debounce_seconds: float = 0.5

    model_config = SettingsConfigDict(
        env_prefix="LINGUISTA_SECURITY_",  # LINGUISTA_SECURITY_REQUEST_TIMEOUT, ...
        extra="ignore",
    )


@lru_cache
def get_security_settings(**kwargs) -> SecuritySettings:
    # Only include kwargs that are not None, so defaults in SecuritySettings are used
    filtered_kwargs = {k: v for k, v in kwargs.items() if v is not None}
    return SecuritySettings(**filtered_kwargs)
