"""
Configuration management for ttyline.

This module handles the stty/shell command names, defaults, and the
optional settings file.
"""

from .settings import Settings
from .defaults import DEFAULT_SETTINGS
from .line_config import LineSettingsConfig

__all__ = ["Settings", "DEFAULT_SETTINGS", "LineSettingsConfig"]
