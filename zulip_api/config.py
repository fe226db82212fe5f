"""Client configuration sourced from arguments or environment variables."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

API_PATH = "/api/v1"


class Config(BaseSettings):
    """Immutable connection settings shared by every domain client.

    Values may be passed directly or read from ``ZULIP_*`` environment
    variables (and an optional ``.env`` file).
    """

    model_config = SettingsConfigDict(
        env_prefix="ZULIP_",
        env_file="./.env",
        extra="ignore",
        frozen=True,
    )

    realm_url: str
    email_address: str
    api_key: str = Field(repr=False)

    # Seconds; the long poll timeout must outlast the server heartbeat.
    timeout: float = 30.0
    long_poll_timeout: float = 600.0

    @field_validator("realm_url")
    @classmethod
    def _normalize_realm_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("realm_url must start with http:// or https://")
        return value.rstrip("/")

    @property
    def api_url(self) -> str:
        """Root URL of the REST API for this realm."""

        return f"{self.realm_url}{API_PATH}"
