"""Configuration loader for the ndau client."""

from __future__ import annotations

from urllib.parse import urlparse

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class NdauConfig(BaseSettings):
    """Pydantic-based configuration model, read from ``NDAU_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="NDAU_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    network: str = "mainnet"
    node_api: str = "https://mainnet-0.ndau.tech:3030"

    log_level: str = "INFO"
    timeout: float = 10.0

    @field_validator("network", mode="before")
    @classmethod
    def normalize_network(cls, value: object) -> str:
        value_str = str(value or "").strip().lower()
        if not value_str:
            raise ValueError("NDAU_NETWORK must not be blank")
        return value_str

    @field_validator("node_api", mode="before")
    @classmethod
    def validate_node_api(cls, value: object) -> str:
        """Require an absolute http(s) URL and drop any trailing slash."""

        value_str = str(value or "").strip()
        parsed = urlparse(value_str)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise ValueError("NDAU_NODE_API must be an http or https URL")
        return value_str.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("Timeout must be positive")
        return value


def load_config() -> NdauConfig:
    """Load configuration from environment variables."""

    return NdauConfig()
