"""Schema check of a properties source built on the accumulating parse layer."""

from __future__ import annotations

from typing import Any, Mapping

from TypedProps.config.schema import KeySpec, Schema
from TypedProps.parsing import (
    ParseResult,
    Unit,
    all_of,
    parse_typed,
    parse_typed_optional,
    parse_typed_with_default,
    warn,
)

UNDECLARED_MESSAGE = "not declared in schema"


def _check_key(properties: Mapping[str, str], spec: KeySpec) -> ParseResult[tuple[str, Any]]:
    if spec.required:
        result = parse_typed(properties, spec.key, spec.type)
    elif spec.default is not None:
        result = parse_typed_with_default(properties, spec.key, spec.type, spec.default)
    else:
        result = parse_typed_optional(properties, spec.key, spec.type)
    return result.map(lambda value: (spec.key, value))


def check_properties(properties: Mapping[str, str], schema: Schema) -> ParseResult[dict[str, Any]]:
    """Coerce every declared key and report all problems at once.

    Every key is checked even after an earlier one fails, so the result
    carries one error per bad key. Keys present in the source but missing
    from the schema produce warnings unless ``schema.allow_unknown`` is set.

    Args:
        properties: Properties source.
        schema: Expected keys and their types.

    Returns:
        Success holding the typed values in schema order (absent optional
        keys without a default are left out), or Failure with every error.
    """
    operations: list[ParseResult[Any]] = [_check_key(properties, spec) for spec in schema.keys]
    if not schema.allow_unknown:
        declared = schema.declared()
        operations.extend(warn(UNDECLARED_MESSAGE, key=key) for key in sorted(set(properties) - declared))

    def collect(items: list[Any]) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for item in items:
            # warn() contributes Unit placeholders.
            if item is Unit.UNIT:
                continue
            key, value = item
            if value is not None:
                values[key] = value
        return values

    return all_of(operations).map(collect)
