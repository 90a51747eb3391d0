"""Application settings and configuration."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class BootstrapSettings(BaseModel):
    """Default admin account seeded at startup."""

    admin_username: str = "admin"
    admin_password: SecretStr = SecretStr("admin123")


class ShellSettings(BaseModel):
    """Interactive shell configuration."""

    max_patient_id: int = 1_000_000
    currency_symbol: str = "$"


class Settings(BaseSettings):
    """Application configuration.

    Settings are loaded from ``HMS_``-prefixed environment variables or a
    .env file. Nested fields use ``__``, e.g. ``HMS_SHELL__CURRENCY_SYMBOL``.
    """

    model_config = SettingsConfigDict(
        env_prefix="HMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # Bootstrap admin
    bootstrap: BootstrapSettings = Field(default_factory=BootstrapSettings)

    # Shell
    shell: ShellSettings = Field(default_factory=ShellSettings)

    # Logging
    log_level: str = "INFO"

    def __init__(self, **data: Any) -> None:
        """Initialize settings with environment variable overrides."""
        super().__init__(**data)
        self._load_env_overrides()

    def _load_env_overrides(self) -> None:
        """Load short-form overrides for the bootstrap admin."""
        if username := os.getenv("HMS_ADMIN_USERNAME"):
            self.bootstrap.admin_username = username
        if password := os.getenv("HMS_ADMIN_PASSWORD"):
            self.bootstrap.admin_password = SecretStr(password)
