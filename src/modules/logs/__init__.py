"""CloudWatch Logs querying through the AWS CLI."""

from modules.logs.runner import AwsCliRunner
from modules.logs.services import SERVICES, prompt_for_missing_options
from modules.logs.time_parser import to_epoch_seconds

__all__ = [
    "AwsCliRunner",
    "SERVICES",
    "prompt_for_missing_options",
    "to_epoch_seconds",
]
