"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for stores.

Usage:
    from userstore.config import StoreSettings

    # Load from environment variables (USERSTORE_*)
    settings = StoreSettings()

    # Or override with explicit values
    settings = StoreSettings(first_id=100)
"""

from __future__ import annotations

try:
    from pydantic import Field
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install pydantic-settings"
    ) from e


class StoreSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for user stores.

    Attributes:
        first_id: First id a new store issues. Must be positive.

    Environment Variables:
        USERSTORE_FIRST_ID
    """

    model_config = SettingsConfigDict(
        env_prefix="USERSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    first_id: int = Field(default=1, ge=1)
