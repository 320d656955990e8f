"""
Access to terminal line settings via stty.

TerminalLineSettings captures the terminal configuration once at
construction and exposes get/set passthroughs plus cached lookups of
numeric properties such as the terminal width and height.
"""

import logging
import time
from contextlib import contextmanager
from typing import Iterator, Optional

from ..config.line_config import LineSettingsConfig
from .exceptions import UnrecognizedSttyOutputError
from .stty_parser import PropertyResult, is_valid_config, parse_property
from .stty_runner import SttyRunner

logger = logging.getLogger(__name__)

# Seconds a cached ``stty -a`` dump stays fresh
PROPERTY_CACHE_TTL = 1.0


class TerminalLineSettings:
    """
    Query and change the line discipline of the controlling terminal.

    Every call spawns one stty process and blocks until it exits. The
    terminal itself is shared with every other process; nothing here
    serializes concurrent changes.
    """

    def __init__(
        self,
        config: Optional[LineSettingsConfig] = None,
        runner: Optional[SttyRunner] = None,
    ):
        self.runner = runner or SttyRunner(config)
        self._tty_props: Optional[str] = None
        self._tty_props_fetched = 0.0

        self._config = self.get("-g")
        logger.debug(f"Config: {self._config}")

        if not is_valid_config(self._config):
            raise UnrecognizedSttyOutputError(self._config)

    def get_config(self) -> str:
        """Return the settings captured at construction."""
        return self._config

    def restore(self):
        """Reset the terminal to sane defaults."""
        self.set("sane")

    def get(self, args: str) -> str:
        """Run stty with args and return its combined output."""
        return self.runner.run(args).output

    def set(self, args: str):
        """Run stty with args for its side effects only."""
        self.runner.run(args)

    def invalidate(self):
        """Forget the cached property dump."""
        self._tty_props = None

    def lookup_property(self, name: str) -> PropertyResult:
        """
        Look up a numeric terminal property such as "rows" or "columns".

        The ``stty -a`` output is cached for up to a second. Failures are
        logged and reported in the result, never raised.
        """
        try:
            result = PropertyResult(name=name, value=parse_property(self._fetch_properties(), name))
        except Exception as e:
            result = PropertyResult(name=name, error=e)

        if not result.found:
            logger.warning(f"Failed to query stty {name}: {result.error}")
        return result

    def get_property(self, name: str) -> int:
        """Return a numeric terminal property, or -1 if it is unavailable."""
        return self.lookup_property(name).value

    @contextmanager
    def preserved(self) -> Iterator["TerminalLineSettings"]:
        """Put the captured configuration back once the block exits."""
        try:
            yield self
        finally:
            self.set(self._config)

    def _fetch_properties(self) -> str:
        now = time.monotonic()
        if self._tty_props is None or now - self._tty_props_fetched > PROPERTY_CACHE_TTL:
            self._tty_props = self.get("-a")
            self._tty_props_fetched = time.monotonic()
        return self._tty_props
