"""Parsing and formatting of textual durations such as ``100ms`` or ``10s``."""

from __future__ import annotations

import re
from datetime import timedelta
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

DURATION_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([a-zA-Z]+)\s*$")

# Unit sizes in seconds
UNITS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "ms": 1e-3,
    "s": 1,
    "m": 60,
    "h": 60 * 60,
    "d": 24 * 60 * 60,
}

# Largest unit first so formatting picks the most succinct representation
_FORMAT_UNITS: tuple[tuple[str, timedelta], ...] = (
    ("d", timedelta(days=1)),
    ("h", timedelta(hours=1)),
    ("m", timedelta(minutes=1)),
    ("s", timedelta(seconds=1)),
    ("ms", timedelta(milliseconds=1)),
)


def parse_duration(text: str) -> timedelta:
    """Parse a duration like ``1s``, ``100ms`` or ``2.5m``.

    Negative values and unknown units are rejected. Precision below one
    microsecond is rounded away.
    """
    match = DURATION_PATTERN.match(text)
    if not match:
        raise ValueError(f"duration is not a valid data duration string: {text!r}")

    value, unit = match.groups()
    if unit not in UNITS:
        raise ValueError(f"unknown time unit: {unit!r}")

    try:
        return timedelta(seconds=float(value) * UNITS[unit])
    except OverflowError as e:
        raise ValueError(f"duration out of range: {text!r}") from e


def format_duration(duration: timedelta) -> str:
    """Render a duration with the largest unit that keeps it a whole number."""
    if not duration:
        return "0s"

    for unit, size in _FORMAT_UNITS:
        count, remainder = divmod(duration, size)
        if not remainder:
            return f"{count}{unit}"

    return f"{duration // timedelta(microseconds=1)}us"


def _coerce_duration(value: Any) -> Any:
    if isinstance(value, str):
        return parse_duration(value)
    return value


# Field type accepting textual durations, timedeltas or seconds
Duration = Annotated[
    timedelta,
    BeforeValidator(_coerce_duration),
    PlainSerializer(format_duration, return_type=str, when_used="json"),
]
