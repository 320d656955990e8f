"""
Raw/cooked mode switching and geometry for line editors.
"""

import logging
import shlex
from typing import Optional

from .line_settings import TerminalLineSettings
from .stty_parser import split_clauses

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24

# Character-at-a-time input without CR/NL translation or flow control
RAW_MODE_ARGS = "-icanon min 1 -icrnl -inlcr -ixon"


class UnixTerminal:
    """
    Terminal wrapper used by a line editor.

    init() switches the terminal to unbuffered, non-echoing input;
    restore() puts back exactly what was there before.
    """

    def __init__(self, settings: TerminalLineSettings):
        self.settings = settings
        self.echo_enabled = True
        self._intr: Optional[str] = None

    def init(self):
        """Enter raw mode with echo off."""
        self.settings.set(RAW_MODE_ARGS)
        self.set_echo_enabled(False)

    def restore(self):
        """Restore the configuration captured when settings were created."""
        self.settings.set(self.settings.get_config())
        self.echo_enabled = True

    def get_width(self) -> int:
        width = self.settings.get_property("columns")
        return width if width >= 1 else DEFAULT_WIDTH

    def get_height(self) -> int:
        height = self.settings.get_property("rows")
        return height if height >= 1 else DEFAULT_HEIGHT

    def set_echo_enabled(self, enabled: bool):
        self.settings.set("echo" if enabled else "-echo")
        self.echo_enabled = enabled

    def disable_interrupt_character(self):
        """Stop ^C (or whatever intr is bound to) from raising SIGINT."""
        intr = self._read_control_char("intr")
        if intr is None:
            logger.warning("Could not determine the interrupt character")
            return
        self._intr = intr
        self.settings.set("intr undef")

    def enable_interrupt_character(self):
        """Rebind the interrupt character saved by disable_interrupt_character()."""
        if self._intr is None:
            return
        self.settings.set(f"intr {shlex.quote(self._intr)}")
        self._intr = None

    def _read_control_char(self, name: str) -> Optional[str]:
        """Find a binding such as "intr = ^C" in ``stty -a`` output."""
        output = self.settings.get("-a")
        for clause in split_clauses(output):
            if clause.startswith(f"{name} = "):
                value = clause[len(name) + 3:].strip()
                if value in ("", "undef", "<undef>"):
                    return None
                return value
        return None
