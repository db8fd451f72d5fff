"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Signing keys never live in settings: each request carries its own source seed
    - get_settings() is cached (lru_cache): single instance per process
    - horizon_url never ends with "/"

Design Decisions:
    - Defaults target the public test network so the service starts without a .env
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TESTNET_PASSPHRASE = "Test SDF Network ; September 2015"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Ledger
    network_passphrase: str = TESTNET_PASSPHRASE
    horizon_url: str = "https://horizon-testnet.stellar.org"
    horizon_timeout_seconds: float = 30
    base_fee: int = 100

    # Federation
    federation_timeout_seconds: float = 10

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("horizon_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("base_fee")
    @classmethod
    def positive_fee(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("base_fee must be positive")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
