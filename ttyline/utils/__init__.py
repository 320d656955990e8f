"""
Utility functions for ttyline.
"""

from .logger import setup_logging
from .validators import validate_stty_installed

__all__ = ["setup_logging", "validate_stty_installed"]
