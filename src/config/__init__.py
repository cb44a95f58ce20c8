"""Configuration package."""

from src.config.settings import (
    EngineSettings,
    Settings,
    TaxSettings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "EngineSettings",
    "Settings",
    "TaxSettings",
    "get_settings",
    "validate_all_settings",
]
