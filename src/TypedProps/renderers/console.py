"""Console text output renderers."""

from __future__ import annotations

from typing import Any, Mapping

import click

from TypedProps.parsing import Kind, ParseResult
from TypedProps.renderers.base import OutputWriter, format_value


def render_properties_text(properties: Mapping[str, str], *, sort_keys: bool = True) -> str:
    """Render properties as aligned ``key = value`` lines.

    Args:
        properties: Properties to render.
        sort_keys: Sort by key instead of keeping mapping order.

    Returns:
        A formatted string ready to be printed.
    """
    keys = sorted(properties) if sort_keys else list(properties)
    if not keys:
        return "(no properties)\n"
    width = max(len(key) for key in keys)
    return "".join(f"{key.ljust(width)} = {properties[key]}\n" for key in keys)


def render_check_text(result: ParseResult[dict[str, Any]]) -> str:
    """Render a schema check result as human-readable text."""
    lines: list[str] = []
    if result.kind is Kind.SUCCESS:
        lines.append(f"OK: {len(result.result)} key(s) valid")
        for key, value in result.result.items():
            lines.append(f"   {key}: {format_value(value)}")
    else:
        lines.append(f"FAILED: {len(result.errors)} error(s)")
        lines.extend(f"   error: {error.message}" for error in result.errors)
    lines.extend(f"   warning: {warning.message}" for warning in result.warnings)
    return "\n".join(lines) + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results to stdout as text."""

    def __init__(self, sort_keys: bool = True) -> None:
        self.sort_keys = sort_keys

    def write_properties(self, properties: Mapping[str, str]) -> None:
        click.echo(render_properties_text(properties, sort_keys=self.sort_keys), nl=False)

    def write_value(self, key: str, value: Any) -> None:
        click.echo(format_value(value))

    def write_check(self, result: ParseResult[dict[str, Any]]) -> None:
        click.echo(render_check_text(result), nl=False)
