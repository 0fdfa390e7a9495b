"""Normalization of user supplied time values to epoch seconds."""

import math
import re
from datetime import datetime

from dateutil import parser as date_parser

from modules.logs.errors import InvalidDatetimeError

EPOCH_PATTERN = re.compile(r"[+-]?\d+")


def to_unix_seconds(dt: datetime) -> int:
    """Floor a datetime to epoch seconds; naive values are host local time."""
    return math.floor(dt.timestamp())


def to_epoch_seconds(value: int | str) -> int:
    """
    Convert a time value into integer epoch seconds.

    Integers are taken to be epoch seconds already and are returned unchanged.
    Strings go through dateutil's permissive parser; a datetime without an
    explicit offset is read in the host's local timezone.

    Args:
        value: Epoch seconds or a datetime string such as "2024-01-01T00:00:00Z"

    Returns:
        Epoch seconds

    Raises:
        InvalidDatetimeError: If the value cannot be read as a datetime
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    if not isinstance(value, str):
        raise InvalidDatetimeError(f"Invalid datetime format: {value!r}")

    try:
        dt = date_parser.parse(value)
    except (ValueError, OverflowError) as exc:
        raise InvalidDatetimeError(f"Invalid datetime format: '{value}'") from exc

    return to_unix_seconds(dt)


def parse_time_value(text: str) -> int | str:
    """Read prompt or flag text: bare digits are epoch seconds, anything else stays a string."""
    text = text.strip()
    if EPOCH_PATTERN.fullmatch(text):
        return int(text)
    return text
