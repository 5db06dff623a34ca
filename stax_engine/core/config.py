"""Engine configuration loaded from environment variables via pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from stax_engine.core.constants import (
    DEFAULT_DIVIDEND_MONTHS_BACK,
    DEFAULT_FX_CACHE_TTL_SECONDS,
    SCORE_CRYPTO_THRESHOLD,
)


class Settings(BaseSettings):
    """Portfolio engine configuration.

    All fields are loaded from environment variables prefixed with ``STAX_``.

    Example::

        export STAX_BASE_CURRENCY="EUR"
        export STAX_FX_CACHE_TTL_SECONDS=3600
    """

    model_config = SettingsConfigDict(
        env_prefix="STAX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_currency: str = Field(
        default="USD",
        min_length=1,
        description="Currency portfolio totals are reported in when none is given",
    )
    fx_cache_ttl_seconds: float = Field(
        default=DEFAULT_FX_CACHE_TTL_SECONDS,
        gt=0,
        description="How long fetched FX rates are served before refetching",
    )
    crypto_concentration_threshold: float = Field(
        default=SCORE_CRYPTO_THRESHOLD,
        ge=0,
        le=100,
        description="Crypto weight (percent) above which the diversification score is penalised",
    )
    dividend_months_back: int = Field(
        default=DEFAULT_DIVIDEND_MONTHS_BACK,
        ge=0,
        description="Months of history in the monthly dividend income series",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton Settings instance."""
    return Settings()
