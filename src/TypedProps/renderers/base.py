"""Base classes for command output writers.

Separates what a command computed from how it is shown.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Any, Mapping
from urllib.parse import SplitResult

from TypedProps.parsing import ParseResult


def format_duration(value: timedelta) -> str:
    """Format a timedelta as an ISO-8601 ``PTnHnMnS`` duration."""
    total_micros = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
    sign = "-" if total_micros < 0 else ""
    total_micros = abs(total_micros)
    seconds, micros = divmod(total_micros, 1_000_000)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    if not (hours or minutes or seconds or micros):
        return "PT0S"
    out = f"{sign}PT"
    if hours:
        out += f"{hours}H"
    if minutes:
        out += f"{minutes}M"
    if seconds or micros:
        out += f"{seconds}.{micros:06d}".rstrip("0").rstrip(".") + "S"
    return out


def format_value(value: Any) -> Any:
    """Convert a coerced value into a JSON-compatible scalar.

    Booleans, ints, floats, strings and None pass through; everything else
    is rendered in the textual form it was parsed from.
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, SplitResult):
        return value.geturl()
    if isinstance(value, timedelta):
        return format_duration(value)
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_properties(self, properties: Mapping[str, str]) -> None:
        """Write a whole properties source."""

    @abstractmethod
    def write_value(self, key: str, value: Any) -> None:
        """Write one coerced value."""

    @abstractmethod
    def write_check(self, result: ParseResult[dict[str, Any]]) -> None:
        """Write the outcome of a schema check."""
