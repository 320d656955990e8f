"""Tests for SttyRunner — all mocked, no real terminal needed."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from ttyline.config.line_config import LineSettingsConfig
from ttyline.core.stty_runner import CommandResult, SttyRunner


def _make_mock_popen(stdout=b"", stderr=b"", returncode=0):
    """Create a mock Popen whose communicate() returns the given bytes."""
    mock_proc = MagicMock()
    mock_proc.communicate = MagicMock(return_value=(stdout, stderr))
    mock_proc.returncode = returncode
    mock_proc.stdin = None
    return mock_proc


# ---------------------------------------------------------------------------
# Command construction
# ---------------------------------------------------------------------------

class TestBuildCommand:
    def test_default_commands(self):
        cmd = SttyRunner().build_command("-g")
        assert cmd == ["sh", "-c", "stty -g < /dev/tty"]

    def test_configured_commands(self):
        runner = SttyRunner(LineSettingsConfig(shell="/bin/bash", stty="/usr/bin/stty"))
        cmd = runner.build_command("-icanon min 1")
        assert cmd == ["/bin/bash", "-c", "/usr/bin/stty -icanon min 1 < /dev/tty"]


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------

class TestRun:
    def test_run_spawns_shell(self):
        mock_proc = _make_mock_popen(b"500:5:bf\n")
        with patch("ttyline.core.stty_runner.subprocess.Popen", return_value=mock_proc) as mock_popen:
            SttyRunner().run("-g")
        cmd = mock_popen.call_args[0][0]
        assert cmd == ["sh", "-c", "stty -g < /dev/tty"]
        assert mock_popen.call_args[1]["stdout"] == subprocess.PIPE
        assert mock_popen.call_args[1]["stderr"] == subprocess.PIPE

    def test_run_combines_stdout_then_stderr(self):
        mock_proc = _make_mock_popen(b"out\n", b"err\n")
        with patch("ttyline.core.stty_runner.subprocess.Popen", return_value=mock_proc):
            result = SttyRunner().run("-a")
        assert result == CommandResult(exit_code=0, stdout="out\n", stderr="err\n", command="-a")
        assert result.output == "out\nerr\n"

    def test_run_keeps_nonzero_exit(self):
        mock_proc = _make_mock_popen(b"", b"stty: invalid argument\n", returncode=1)
        with patch("ttyline.core.stty_runner.subprocess.Popen", return_value=mock_proc):
            result = SttyRunner().run("bogus")
        assert result.exit_code == 1
        assert result.output == "stty: invalid argument\n"

    def test_run_decodes_invalid_utf8(self):
        mock_proc = _make_mock_popen(b"rows\xff 24")
        with patch("ttyline.core.stty_runner.subprocess.Popen", return_value=mock_proc):
            result = SttyRunner().run("-a")
        assert result.stdout.startswith("rows")

    def test_run_closes_streams(self):
        mock_proc = _make_mock_popen(b"x=1")
        with patch("ttyline.core.stty_runner.subprocess.Popen", return_value=mock_proc):
            SttyRunner().run("-g")
        mock_proc.stdout.close.assert_called_once()
        mock_proc.stderr.close.assert_called_once()

    def test_run_ignores_close_errors(self):
        mock_proc = _make_mock_popen(b"x=1")
        mock_proc.stdout.close.side_effect = OSError("bad fd")
        with patch("ttyline.core.stty_runner.subprocess.Popen", return_value=mock_proc):
            result = SttyRunner().run("-g")
        assert result.output == "x=1"
        mock_proc.stderr.close.assert_called_once()

    def test_run_closes_streams_on_read_failure(self):
        mock_proc = _make_mock_popen()
        mock_proc.communicate.side_effect = OSError("read failed")
        with patch("ttyline.core.stty_runner.subprocess.Popen", return_value=mock_proc):
            with pytest.raises(OSError):
                SttyRunner().run("-g")
        mock_proc.stdout.close.assert_called_once()

    def test_spawn_failure_propagates(self):
        with patch("ttyline.core.stty_runner.subprocess.Popen", side_effect=FileNotFoundError("sh")):
            with pytest.raises(FileNotFoundError):
                SttyRunner().run("-g")
