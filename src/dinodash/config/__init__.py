"""Configuration for dinodash."""

from dinodash.config.settings import DisplaySettings, FieldSettings, Settings, get_settings

__all__ = ["DisplaySettings", "FieldSettings", "Settings", "get_settings"]
