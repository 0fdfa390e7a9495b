import json
import logging

import click

from modules.logs.errors import AwsAbError
from modules.logs.models import QueryConfig
from modules.logs.runner import AwsCliRunner
from modules.logs.services import CLOUDWATCH_LOGS, SERVICES, prompt_for_missing_options
from modules.logs.time_parser import parse_time_value

logger = logging.getLogger(__name__)


def service_flags(func):
    """Add one `--<service>` flag per registered service, all writing to `service`.

    The underscore spelling (`--cloudwatch_logs`) is accepted as an alias.
    """
    for key, service in reversed(list(SERVICES.items())):
        names = dict.fromkeys([f"--{key.replace('_', '-')}", f"--{key}"])
        func = click.option(
            *names,
            "service",
            flag_value=key,
            help=service.description,
        )(func)
    return func


def _time_option(ctx, param, value):
    return parse_time_value(value) if value is not None else None


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-p", "--profile", type=str, default=None, help="AWS profile to use")
@service_flags
@click.option("--log-group", type=str, default=None, help="CloudWatch log group name")
@click.option("--start-time", type=str, default=None, callback=_time_option, help="Start datetime or epoch seconds")
@click.option("--end-time", type=str, default=None, callback=_time_option, help="End datetime or epoch seconds")
@click.option("--filter-pattern", type=str, default=None, help="CloudWatch filter pattern")
@click.pass_context
def run(ctx: click.Context, profile: str | None, service: str | None, **params):
    """Query AWS services through the AWS CLI, prompting for missing parameters."""
    if not service:
        click.echo("No action specified. Use -h for help.")
        ctx.exit(1)

    config = QueryConfig(profile=profile, service=service, **params)

    try:
        runner = AwsCliRunner(config.profile)
        config = prompt_for_missing_options(config)

        if config.service == CLOUDWATCH_LOGS:
            result = runner.query_cloudwatch_logs(
                config.log_group,
                config.start_time,
                config.end_time,
                config.filter_pattern,
            )
            result.raise_for_error()
            click.echo("CloudWatch Log Events:")
            click.echo(json.dumps(result.events, indent=2))
    except AwsAbError as e:
        logger.debug(f"{e.kind}: {e.message}")
        click.echo(e.message, err=True)
        ctx.exit(1)
