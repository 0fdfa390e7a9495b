import logging
import subprocess
from typing import Sequence

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class CommandTimeoutError(RuntimeError):
    """Raised when an external command does not exit within its timeout."""

    def __init__(self, args: Sequence[str], timeout: float):
        self.args_list = list(args)
        self.timeout = timeout
        super().__init__(f"Command '{' '.join(args)}' timed out after {timeout:g}s")


class CommandOutput(BaseModel):
    """Captured result of one finished external process."""

    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0


def run_command(args: Sequence[str], timeout: float | None = None) -> CommandOutput:
    """
    Run an external command from an argument list and capture its output.

    The command is never passed through a shell. The call blocks until the
    process exits or the timeout expires.

    Args:
        args: Program followed by its arguments
        timeout: Seconds to wait before killing the process (None waits forever)

    Returns:
        CommandOutput with exit status, stdout and stderr

    Raises:
        FileNotFoundError: If the program is not on the PATH
        CommandTimeoutError: If the process exceeds the timeout
    """
    args = [str(arg) for arg in args]
    logger.debug(f"Running: {' '.join(args)}")

    try:
        completed = subprocess.run(
            args, capture_output=True, text=True, timeout=timeout
        )
    except subprocess.TimeoutExpired as exc:
        raise CommandTimeoutError(args, timeout) from exc

    logger.debug(f"Exit status {completed.returncode} for {args[0]}")
    return CommandOutput(
        args=args,
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
