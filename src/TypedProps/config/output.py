"""Output domain configuration for CLI rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from TypedProps.config.common import (
    expect_bool,
    expect_choice,
    get_optional_value,
    get_required_value,
    get_section,
)

OUTPUT_FORMATS = {"console", "json"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration."""

    format: str
    sort_keys: bool


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing or the format is unknown.
    """
    section = get_section(raw, "output", required=True)
    return OutputConfig(
        format=expect_choice(get_required_value(section, "format", "output.format"), "output.format", OUTPUT_FORMATS),
        sort_keys=expect_bool(get_optional_value(section, "sort_keys", True), "output.sort_keys"),
    )
