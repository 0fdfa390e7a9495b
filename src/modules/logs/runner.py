import json
import logging

from lib.process import CommandTimeoutError, run_command
from modules.logs.errors import (
    CliNotInstalledError,
    ErrorKind,
    InvalidDatetimeError,
    NotLoggedInError,
)
from modules.logs.models import LogQuery, QueryResult
from modules.logs.time_parser import to_epoch_seconds
from settings import AWS_CLI_BINARY, AWS_TIME_UNIT, COMMAND_TIMEOUT_SECONDS, TimeUnit

logger = logging.getLogger(__name__)


class AwsCliRunner:
    """
    Runs read-only queries through the AWS CLI.

    Construction checks that the CLI is installed and that an identity resolves
    for the profile. If either check fails the constructor raises, so an
    instance is always ready to query.
    """

    def __init__(
        self,
        profile: str | None = None,
        binary: str = AWS_CLI_BINARY,
        timeout: float | None = COMMAND_TIMEOUT_SECONDS,
        time_unit: TimeUnit = AWS_TIME_UNIT,
    ):
        self.profile = profile
        self.binary = binary
        self.timeout = timeout
        self.time_unit = time_unit

        if not self.check_aws_installed():
            raise CliNotInstalledError()
        if not self.check_login():
            raise NotLoggedInError()

    def _profile_args(self) -> list[str]:
        return ["--profile", self.profile] if self.profile else []

    def check_aws_installed(self) -> bool:
        try:
            output = run_command([self.binary, "--version"], timeout=self.timeout)
        except (OSError, CommandTimeoutError) as e:
            logger.warning(f"AWS CLI probe failed: {e}", extra={"binary": self.binary})
            return False
        return output.success

    def check_login(self) -> bool:
        command = [self.binary, "sts", "get-caller-identity", *self._profile_args()]
        try:
            output = run_command(command, timeout=self.timeout)
        except (OSError, CommandTimeoutError) as e:
            logger.warning(f"Identity probe failed: {e}", extra={"profile": self.profile})
            return False

        if output.stderr:
            logger.info(
                f"Identity probe stderr: {output.stderr.strip()}",
                extra={"profile": self.profile, "returncode": output.returncode},
            )
        return output.success and not output.stderr and bool(output.stdout)

    def build_filter_command(self, query: LogQuery) -> list[str]:
        """Argument list for `aws logs filter-log-events`, profile appended when set."""
        scale = 1000 if self.time_unit == TimeUnit.MILLISECONDS else 1
        return [
            self.binary, "logs", "filter-log-events",
            "--log-group-name", query.log_group,
            "--start-time", str(query.start_time * scale),
            "--end-time", str(query.end_time * scale),
            "--filter-pattern", query.filter_pattern,
            *self._profile_args(),
        ]

    def query_cloudwatch_logs(
        self,
        log_group: str,
        start_time: int | str,
        end_time: int | str,
        filter_pattern: str,
    ) -> QueryResult:
        """
        Fetch log events from a log group within a time range.

        Args:
            log_group: CloudWatch log group name
            start_time: Epoch seconds or datetime string
            end_time: Epoch seconds or datetime string
            filter_pattern: CloudWatch filter pattern, passed through verbatim

        Returns:
            QueryResult holding the parsed JSON output, or the error kind and message
        """
        try:
            query = LogQuery(
                log_group=log_group,
                start_time=to_epoch_seconds(start_time),
                end_time=to_epoch_seconds(end_time),
                filter_pattern=filter_pattern,
            )
        except InvalidDatetimeError as e:
            return QueryResult.fail(ErrorKind.BAD_TIME_FORMAT, e.message)

        if query.start_time > query.end_time:
            return QueryResult.fail(
                ErrorKind.BAD_TIME_RANGE,
                f"Start time {query.start_time} is after end time {query.end_time}",
            )

        command = self.build_filter_command(query)
        logger.info(
            f"Querying {query.log_group} from {query.start_time} to {query.end_time}",
            extra={"log_group": query.log_group, "profile": self.profile},
        )

        try:
            output = run_command(command, timeout=self.timeout)
        except (OSError, CommandTimeoutError) as e:
            return QueryResult.fail(ErrorKind.QUERY_FAILED, f"Error querying CloudWatch logs: {e}")

        logger.info(
            f"filter-log-events exited with {output.returncode}",
            extra={"log_group": query.log_group, "returncode": output.returncode},
        )
        if not output.success:
            return QueryResult.fail(
                ErrorKind.QUERY_FAILED,
                f"Error querying CloudWatch logs: {output.stderr.strip()}",
            )

        try:
            events = json.loads(output.stdout)
        except json.JSONDecodeError as e:
            return QueryResult.fail(
                ErrorKind.QUERY_FAILED,
                f"Error querying CloudWatch logs: unreadable output ({e})",
            )

        return QueryResult.ok(events)
