from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from TypedProps.config.output import OutputConfig, load_output
from TypedProps.config.runtime import RuntimeConfig, check_runtime, load_runtime

DEFAULT_CONFIG_TEXT = """
log:
  level: INFO
  to_file: false
  dir: log

output:
  format: console
  sort_keys: true
"""


@dataclass(frozen=True, slots=True)
class AppConfig:
    """CLI root configuration."""

    runtime: RuntimeConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    output = load_output(raw)
    check_runtime(runtime)
    return AppConfig(runtime=runtime, output=output)


def load_config(path: Path) -> AppConfig:
    """Load a complete YAML config file without default merge."""
    return parse_config_dict(parse_yaml(path.read_text(encoding="utf-8")))


def load_config_with_defaults(
    config_path: Path | None, defaults_text: str = DEFAULT_CONFIG_TEXT
) -> AppConfig:
    """Load config by merging built-in defaults and an optional override file.

    Args:
        config_path: Override file; None or a missing file means defaults only.
        defaults_text: YAML text of the defaults.

    Returns:
        Parsed configuration.
    """
    base = parse_yaml(defaults_text)
    if config_path is None or not config_path.is_file():
        return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
