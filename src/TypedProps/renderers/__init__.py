"""Output renderers for command results.

The module exports the OutputWriter base class and a factory that picks a
writer from configuration.
"""

from __future__ import annotations

from TypedProps.config import OutputConfig
from TypedProps.renderers.base import OutputWriter, format_value
from TypedProps.renderers.console import ConsoleOutputWriter, render_check_text, render_properties_text
from TypedProps.renderers.json import JsonOutputWriter, render_check_json


def create_output_writer(config: OutputConfig) -> OutputWriter:
    """Create the output writer for the configured format.

    Raises:
        ValueError: If the format is unknown.
    """
    if config.format == "console":
        return ConsoleOutputWriter(sort_keys=config.sort_keys)
    if config.format == "json":
        return JsonOutputWriter(sort_keys=config.sort_keys)
    raise ValueError(f"Unsupported output format: {config.format}")


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonOutputWriter",
    "format_value",
    "render_check_json",
    "render_check_text",
    "render_properties_text",
    "create_output_writer",
]
