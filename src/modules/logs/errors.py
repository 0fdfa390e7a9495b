"""Error kinds surfaced to the user."""

from enum import StrEnum


class ErrorKind(StrEnum):
    TOOL_MISSING = "tool-missing"
    AUTH_FAILED = "auth-failed"
    BAD_TIME_FORMAT = "bad-time-format"
    BAD_TIME_RANGE = "bad-time-range"
    QUERY_FAILED = "query-failed"


class AwsAbError(Exception):
    """Base class for every error the CLI reports to the user."""

    kind: ErrorKind = ErrorKind.QUERY_FAILED

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class CliNotInstalledError(AwsAbError):
    kind = ErrorKind.TOOL_MISSING

    def __init__(self, message: str = "AWS CLI is not installed"):
        super().__init__(message)


class NotLoggedInError(AwsAbError):
    kind = ErrorKind.AUTH_FAILED

    def __init__(self, message: str = "Not logged in to AWS with the provided profile"):
        super().__init__(message)


class InvalidDatetimeError(AwsAbError, ValueError):
    kind = ErrorKind.BAD_TIME_FORMAT


class QueryFailedError(AwsAbError):
    kind = ErrorKind.QUERY_FAILED


class InvalidTimeRangeError(AwsAbError, ValueError):
    kind = ErrorKind.BAD_TIME_RANGE


ERRORS_BY_KIND = {
    error.kind: error
    for error in (
        CliNotInstalledError,
        NotLoggedInError,
        InvalidDatetimeError,
        InvalidTimeRangeError,
        QueryFailedError,
    )
}
