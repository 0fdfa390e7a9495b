"""Tests for lib.process."""

import subprocess
from unittest.mock import patch

import pytest

from lib.process import CommandOutput, CommandTimeoutError, run_command


class TestRunCommand:
    """Tests for run_command function."""

    def test_captures_output(self, make_completed) -> None:
        """Test that exit status and both streams are captured."""
        with patch("lib.process.subprocess.run", return_value=make_completed(3, "out", "err")) as run:
            output = run_command(["aws", "--version"], timeout=5)

        assert output == CommandOutput(args=["aws", "--version"], returncode=3, stdout="out", stderr="err")
        run.assert_called_once_with(["aws", "--version"], capture_output=True, text=True, timeout=5)

    def test_never_uses_shell(self, make_completed) -> None:
        """Test that the command is passed as a list without shell=True."""
        with patch("lib.process.subprocess.run", return_value=make_completed()) as run:
            run_command(["aws", "logs", "--filter-pattern", "'quoted'"])

        args, kwargs = run.call_args
        assert args[0] == ["aws", "logs", "--filter-pattern", "'quoted'"]
        assert "shell" not in kwargs

    def test_arguments_stringified(self, make_completed) -> None:
        """Test that numeric arguments are converted to strings."""
        with patch("lib.process.subprocess.run", return_value=make_completed()) as run:
            output = run_command(["aws", "--start-time", 1704067200])

        assert run.call_args.args[0] == ["aws", "--start-time", "1704067200"]
        assert output.args == ["aws", "--start-time", "1704067200"]

    def test_none_streams_become_empty(self, make_completed) -> None:
        """Test that missing streams are read as empty strings."""
        with patch("lib.process.subprocess.run", return_value=make_completed(0, None, None)):
            output = run_command(["aws"])

        assert output.stdout == ""
        assert output.stderr == ""

    def test_timeout_raises_command_timeout(self) -> None:
        """Test that TimeoutExpired is wrapped."""
        with patch("lib.process.subprocess.run", side_effect=subprocess.TimeoutExpired(["aws"], 2)):
            with pytest.raises(CommandTimeoutError) as exc_info:
                run_command(["aws", "logs"], timeout=2)

        assert exc_info.value.timeout == 2
        assert "timed out after 2s" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, subprocess.TimeoutExpired)

    def test_missing_binary_propagates(self) -> None:
        """Test that FileNotFoundError reaches the caller."""
        with patch("lib.process.subprocess.run", side_effect=FileNotFoundError("aws")):
            with pytest.raises(FileNotFoundError):
                run_command(["aws"])


class TestCommandOutput:
    """Tests for CommandOutput model."""

    def test_success_on_zero(self) -> None:
        """Test that exit status zero is success."""
        assert CommandOutput(args=["aws"], returncode=0).success is True

    def test_failure_on_nonzero(self) -> None:
        """Test that any other exit status is failure."""
        assert CommandOutput(args=["aws"], returncode=255).success is False
