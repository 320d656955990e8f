"""
Command names used to reach the terminal.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .defaults import DEFAULT_SH, DEFAULT_STTY, JLINE_SH, JLINE_STTY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineSettingsConfig:
    """Shell and stty commands, resolved once and passed to the controller."""
    shell: str = DEFAULT_SH
    stty: str = DEFAULT_STTY

    @classmethod
    def load(
        cls,
        settings=None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "LineSettingsConfig":
        """
        Resolve the commands from the environment and settings file.

        For each of "jline.sh" and "jline.stty" the first hit wins:
        an environment variable with that exact name, the JLINE_SH /
        JLINE_STTY environment variable, the settings file, the default.

        Args:
            settings: Optional Settings instance
            environ: Environment mapping, os.environ by default
        """
        if environ is None:
            environ = os.environ

        config = cls(
            shell=_lookup(JLINE_SH, DEFAULT_SH, settings, environ),
            stty=_lookup(JLINE_STTY, DEFAULT_STTY, settings, environ),
        )
        logger.debug(f"Using shell={config.shell!r} stty={config.stty!r}")
        return config


def _lookup(key: str, default: str, settings, environ: Mapping[str, str]) -> str:
    env_name = key.upper().replace(".", "_")
    for value in (environ.get(key), environ.get(env_name)):
        if value:
            return value
    if settings is not None:
        value = settings.get(key)
        if value:
            return str(value)
    return default
