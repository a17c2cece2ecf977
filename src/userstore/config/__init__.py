"""Configuration module using Pydantic Settings.

Provides typed configuration for stores with environment variable support.

Usage:
    from userstore.config import StoreSettings

    settings = StoreSettings(first_id=100)
"""

from userstore.config.settings import StoreSettings

__all__ = [
    "StoreSettings",
]
