"""Reading and writing properties text."""

from __future__ import annotations

from TypedProps.properties.loader import (
    from_file,
    load_env_file,
    load_properties,
    parse_properties,
)
from TypedProps.properties.writer import format_properties, store_properties

__all__ = [
    "from_file",
    "load_env_file",
    "load_properties",
    "parse_properties",
    "format_properties",
    "store_properties",
]
