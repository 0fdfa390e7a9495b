"""Shared pytest fixtures for the test suite."""

import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


def completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess:
    """Build a finished process as subprocess.run would return it."""
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def identity_json() -> str:
    """Output of a successful `aws sts get-caller-identity`."""
    return (
        '{"UserId": "AIDAEXAMPLE", "Account": "123456789012", '
        '"Arn": "arn:aws:iam::123456789012:user/dev"}'
    )


@pytest.fixture
def fake_aws(identity_json):
    """
    Patch subprocess.run with a fake aws binary.

    Responses are keyed by the aws subcommand ("--version", "sts", "logs") and
    every call is recorded in `calls`.
    """

    class FakeAws:
        def __init__(self):
            self.calls: list[list[str]] = []
            self.responses = {
                "--version": completed(stdout="aws-cli/2.15.0 Python/3.11.6"),
                "sts": completed(stdout=identity_json),
                "logs": completed(stdout='{"events": [], "searchedLogStreams": []}'),
            }

        def __call__(self, args, **kwargs):
            self.calls.append(list(args))
            response = self.responses[args[1]]
            if isinstance(response, BaseException):
                raise response
            return response

        def calls_for(self, subcommand: str) -> list[list[str]]:
            return [call for call in self.calls if call[1] == subcommand]

    fake = FakeAws()
    with patch("lib.process.subprocess.run", side_effect=fake):
        yield fake


@pytest.fixture
def make_completed():
    """Factory for subprocess.CompletedProcess results."""
    return completed
