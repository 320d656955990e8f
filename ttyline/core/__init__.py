"""
Core terminal line settings functionality for ttyline.

This module provides:
- Running stty against the controlling terminal
- Parsing stty property output
- Capturing, changing and restoring line settings
"""

from .exceptions import LineSettingsError, UnrecognizedSttyOutputError, PropertyNotFoundError
from .stty_parser import PropertyResult, parse_property, find_property, is_valid_config
from .stty_runner import SttyRunner, CommandResult
from .line_settings import TerminalLineSettings
from .unix_terminal import UnixTerminal

__all__ = [
    "LineSettingsError",
    "UnrecognizedSttyOutputError",
    "PropertyNotFoundError",
    "PropertyResult",
    "parse_property",
    "find_property",
    "is_valid_config",
    "SttyRunner",
    "CommandResult",
    "TerminalLineSettings",
    "UnixTerminal",
]
