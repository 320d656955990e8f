"""
Validation utilities for ttyline.
"""

import os
import shutil


def validate_stty_installed(stty_binary: str = "stty") -> bool:
    """
    Check if the stty utility is installed and accessible.

    Args:
        stty_binary: Path or name of the stty binary

    Returns:
        True if the binary can be found
    """
    return shutil.which(stty_binary) is not None


def has_controlling_terminal() -> bool:
    """Return True if /dev/tty can be opened by this process."""
    try:
        fd = os.open("/dev/tty", os.O_RDONLY | os.O_NOCTTY)
    except OSError:
        return False
    os.close(fd)
    return True
