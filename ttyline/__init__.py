"""
ttyline - terminal line settings through stty.
"""

from .config import LineSettingsConfig
from .core import (
    LineSettingsError,
    UnrecognizedSttyOutputError,
    TerminalLineSettings,
    UnixTerminal,
)

__version__ = "1.0.0"

__all__ = [
    "LineSettingsConfig",
    "LineSettingsError",
    "UnrecognizedSttyOutputError",
    "TerminalLineSettings",
    "UnixTerminal",
]
