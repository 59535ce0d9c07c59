"""JSON output renderers.

Renders properties, single values and schema check results as JSON
documents on stdout.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

import click

from TypedProps.parsing import Kind, ParseResult
from TypedProps.renderers.base import OutputWriter, format_value


def render_check_json(result: ParseResult[dict[str, Any]]) -> dict[str, Any]:
    """Render a schema check result into a JSON-serializable dict.

    Args:
        result: Outcome of ``check_properties``.

    Returns:
        Dict with ``ok``, ``values`` (on success), ``warnings`` and ``errors``.
    """
    payload: dict[str, Any] = {"ok": result.kind is Kind.SUCCESS}
    if result.kind is Kind.SUCCESS:
        payload["values"] = {key: format_value(value) for key, value in result.result.items()}
    payload["warnings"] = [warning.message for warning in result.warnings]
    payload["errors"] = [error.message for error in result.errors]
    return payload


class JsonOutputWriter(OutputWriter):
    """Write results to stdout as JSON."""

    def __init__(self, sort_keys: bool = True) -> None:
        self.sort_keys = sort_keys

    def _echo(self, payload: Any) -> None:
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=self.sort_keys))

    def write_properties(self, properties: Mapping[str, str]) -> None:
        self._echo(dict(properties))

    def write_value(self, key: str, value: Any) -> None:
        self._echo({key: format_value(value)})

    def write_check(self, result: ParseResult[dict[str, Any]]) -> None:
        self._echo(render_check_json(result))
