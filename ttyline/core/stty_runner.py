"""
Execution of the ``stty`` utility against the controlling terminal.

Commands go through a shell so that ``stty`` can read from ``/dev/tty``
instead of whatever stdin the calling process has.
"""

import logging
import subprocess
from dataclasses import dataclass
from typing import List, Optional

from ..config.line_config import LineSettingsConfig

logger = logging.getLogger(__name__)

TTY_DEVICE = "/dev/tty"


@dataclass
class CommandResult:
    """Result of a single stty invocation."""
    exit_code: int
    stdout: str
    stderr: str
    command: str  # stty arguments, e.g. "-g"

    @property
    def output(self) -> str:
        """Combined output, stdout followed by stderr."""
        return self.stdout + self.stderr


class SttyRunner:
    """
    Runs stty with a given argument string and collects its output.

    Calls block until the process exits. No timeout is applied.
    """

    def __init__(self, config: Optional[LineSettingsConfig] = None):
        self.config = config or LineSettingsConfig()

    def build_command(self, args: str) -> List[str]:
        """Construct [shell, -c, "stty <args> < /dev/tty"]."""
        return [
            self.config.shell,
            "-c",
            f"{self.config.stty} {args} < {TTY_DEVICE}",
        ]

    def run(self, args: str) -> CommandResult:
        """
        Run stty with the given arguments.

        Both pipes are drained together so a chatty stderr cannot block
        stdout. A non-zero exit status is recorded but not raised.

        Raises:
            OSError: The shell could not be started or its pipes failed
        """
        cmd = self.build_command(args)
        logger.debug(f"Running: {cmd}")

        process = subprocess.Popen(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            shell=False,
        )
        try:
            stdout, stderr = process.communicate()
        finally:
            _close_quietly(process.stdin, process.stdout, process.stderr)

        result = CommandResult(
            exit_code=process.returncode,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
            command=args,
        )
        logger.debug(f"Result: {result.output!r}")
        return result


def _close_quietly(*streams):
    for stream in streams:
        if stream is None:
            continue
        try:
            stream.close()
        except OSError:
            pass
