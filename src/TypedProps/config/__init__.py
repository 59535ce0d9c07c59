from __future__ import annotations

"""Public configuration API for the TypedProps CLI."""

from TypedProps.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from TypedProps.config.output import OutputConfig
from TypedProps.config.runtime import RuntimeConfig
from TypedProps.config.schema import KeySpec, Schema, load_schema, load_schema_file

__all__ = [
    "RuntimeConfig",
    "OutputConfig",
    "AppConfig",
    "KeySpec",
    "Schema",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
    "load_schema",
    "load_schema_file",
]
