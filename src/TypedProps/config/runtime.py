"""The ``log:`` section of the CLI config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from TypedProps.config.common import (
    expect_bool,
    expect_str,
    get_required_value,
    get_section,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Arguments for ``configure_logging``.

    Attributes:
        level: Console level name, upper-cased.
        to_file: Also keep a DEBUG log per command under ``dir``.
        dir: Base directory of the per-command log files.
    """

    level: str
    to_file: bool
    dir: str


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    """Read the ``log`` section; all three fields are required."""
    section = get_section(raw, "log", required=True)
    level = expect_str(get_required_value(section, "level", "log.level"), "log.level")
    return RuntimeConfig(
        level=level.strip().upper(),
        to_file=expect_bool(get_required_value(section, "to_file", "log.to_file"), "log.to_file"),
        dir=expect_str(get_required_value(section, "dir", "log.dir"), "log.dir"),
    )


def check_runtime(config: RuntimeConfig) -> None:
    if config.level not in LOG_LEVELS:
        raise ValueError(f"log.level must be one of {', '.join(LOG_LEVELS)}, got {config.level!r}")
    if config.to_file and not config.dir.strip():
        raise ValueError("log.dir must name a directory when log.to_file is true")
