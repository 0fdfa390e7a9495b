"""Registry of query types the CLI exposes, and prompting for their parameters."""

import logging
from typing import Callable

import click

from modules.logs.models import QueryConfig, ServiceConfig, ServiceParam
from modules.logs.time_parser import parse_time_value

logger = logging.getLogger(__name__)

CLOUDWATCH_LOGS = "cloudwatch_logs"

SERVICES: dict[str, ServiceConfig] = {
    CLOUDWATCH_LOGS: ServiceConfig(
        description="Query CloudWatch logs",
        params=[
            ServiceParam(key="log_group", prompt="Enter CloudWatch log group name"),
            ServiceParam(key="start_time", prompt="Enter start datetime", type="time"),
            ServiceParam(key="end_time", prompt="Enter end datetime", type="time"),
            ServiceParam(
                key="filter_pattern",
                prompt="Enter filter pattern for CloudWatch logs",
                allow_empty=True,
            ),
        ],
    ),
}


def default_prompt(param: ServiceParam) -> str:
    return click.prompt(
        param.prompt,
        type=str,
        default="" if param.allow_empty else None,
        show_default=False,
        prompt_suffix=": ",
    )


def prompt_for_missing_options(
    config: QueryConfig,
    prompt: Callable[[ServiceParam], str] = default_prompt,
) -> QueryConfig:
    """
    Ask for every parameter of the selected service that the config lacks.

    Prompts run in registry order. The original config is left untouched;
    a filled copy is returned.
    """
    service = SERVICES[config.service]
    missing = config.missing(service.keys)
    updates = {}
    for param in service.params:
        if param.key not in missing:
            continue
        value = prompt(param)
        updates[param.key] = parse_time_value(value) if param.type == "time" else value

    if updates:
        logger.debug(f"Prompted for {', '.join(updates)}")
    return config.model_copy(update=updates)
