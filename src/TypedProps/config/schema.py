"""Schema configuration: the keys a properties source is expected to hold.

A schema document looks like::

    keys:
      server.port: {type: integer, required: true}
      server.host: {type: string, default: localhost}
      feature.enabled: boolean
    allow_unknown: false

The shorthand ``key: <type>`` declares a required key. A key with a
``default`` is optional.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from TypedProps.config.common import (
    expect_bool,
    expect_choice,
    expect_scalar_text,
    get_optional_value,
    get_required_value,
    get_section,
)
from TypedProps.parsing.functions import FORMATS

_ALLOWED_ENTRY_FIELDS = {"type", "required", "default"}


@dataclass(frozen=True, slots=True)
class KeySpec:
    """Declaration of one expected key.

    Attributes:
        key: Property key.
        type: Type name, one of ``FORMATS``.
        required: Whether the key must be present.
        default: Coerced default value, or None when there is no default.
    """

    key: str
    type: str
    required: bool = True
    default: Any = None


@dataclass(frozen=True, slots=True)
class Schema:
    """Validated schema."""

    keys: tuple[KeySpec, ...]
    allow_unknown: bool = False

    def declared(self) -> set[str]:
        return {spec.key for spec in self.keys}


def _coerce_default(key: str, type_name: str, text: str, config_key: str) -> Any:
    _fmt, parser = FORMATS[type_name]
    try:
        return parser(key, text)
    except (ValueError, OverflowError, OSError) as e:
        raise ValueError(f"{config_key} is not a valid {type_name}: {e}") from e


def _load_entry(key: Any, entry: Any) -> KeySpec:
    if not isinstance(key, str):
        raise TypeError(f"keys entries must use string keys, got {key!r}")
    config_key = f"keys.{key}"
    if isinstance(entry, str):
        entry = {"type": entry}
    if not isinstance(entry, Mapping):
        raise TypeError(f"{config_key} must be a type name or an object")

    unknown = {str(field) for field in entry} - _ALLOWED_ENTRY_FIELDS
    if unknown:
        raise ValueError(f"{config_key} has unknown field(s): {sorted(unknown)}")

    type_name = expect_choice(get_required_value(entry, "type", f"{config_key}.type"), f"{config_key}.type", set(FORMATS))
    has_default = entry.get("default") is not None
    required = expect_bool(get_optional_value(entry, "required", not has_default), f"{config_key}.required")
    if required and has_default:
        raise ValueError(f"{config_key}.default cannot be combined with required: true")

    default = None
    if has_default:
        text = expect_scalar_text(entry["default"], f"{config_key}.default")
        default = _coerce_default(key, type_name, text, f"{config_key}.default")
    return KeySpec(key=key, type=type_name, required=required, default=default)


def load_schema(raw: Mapping[str, Any]) -> Schema:
    """Load a schema from a raw mapping.

    Args:
        raw: Root schema mapping.

    Returns:
        Parsed schema, keys in declaration order.

    Raises:
        TypeError: If entry types are invalid.
        ValueError: If required fields are missing, a type is unknown or a
            default does not parse as its type.
    """
    section = get_section(raw, "keys", required=True)
    keys = tuple(_load_entry(key, entry) for key, entry in section.items())
    if not keys:
        raise ValueError("keys must declare at least one key")
    return Schema(
        keys=keys,
        allow_unknown=expect_bool(get_optional_value(raw, "allow_unknown", False), "allow_unknown"),
    )


def load_schema_file(path: Path) -> Schema:
    """Load a YAML schema file."""
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Schema root must be a mapping/object")
    return load_schema(data)
