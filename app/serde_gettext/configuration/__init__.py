"""Configuration module - public API.

Centralized configuration using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    GettextSettings: Catalog and resolution settings class
    max_depth_limit: Upper bound for GETTEXT_MAX_DEPTH
"""

from serde_gettext.configuration.gettext import GettextSettings, max_depth_limit
from serde_gettext.configuration.settings import Settings, settings

__all__ = ["Settings", "GettextSettings", "max_depth_limit", "settings"]
