from __future__ import annotations

"""Shared helpers for YAML configuration loading and validation."""

from typing import Any, Mapping


def get_section(raw: Mapping[str, Any], key: str, *, required: bool) -> Mapping[str, Any]:
    """Return a mapping section from a parent mapping.

    Args:
        raw: Parent configuration mapping.
        key: Section name.
        required: Whether the section must exist.

    Returns:
        Section mapping, or empty mapping for optional missing sections.

    Raises:
        ValueError: If section is required but missing.
        TypeError: If section is not a mapping.
    """
    section = raw.get(key)
    if section is None:
        if required:
            raise ValueError(f"Missing required config: {key}")
        return {}
    if not isinstance(section, Mapping):
        raise TypeError(f"{key} must be an object")
    return section


def get_required_value(section: Mapping[str, Any], field: str, config_key: str) -> Any:
    """Return a required field value from a section.

    Raises:
        ValueError: If field is missing.
    """
    if field not in section:
        raise ValueError(f"Missing required config: {config_key}")
    return section[field]


def get_optional_value(section: Mapping[str, Any], field: str, default: Any) -> Any:
    """Return optional field value with default."""
    return section.get(field, default)


def expect_str(value: Any, config_key: str) -> str:
    """Validate and return string value."""
    if not isinstance(value, str):
        raise TypeError(f"{config_key} must be a string")
    return value


def expect_bool(value: Any, config_key: str) -> bool:
    """Validate and return boolean value."""
    if not isinstance(value, bool):
        raise TypeError(f"{config_key} must be a boolean")
    return value


def expect_choice(value: Any, config_key: str, allowed: set[str]) -> str:
    """Validate a lower-cased string against a fixed set of choices."""
    choice = expect_str(value, config_key).strip().lower()
    if choice not in allowed:
        raise ValueError(f"{config_key} must be one of {sorted(allowed)}")
    return choice


def expect_scalar_text(value: Any, config_key: str) -> str:
    """Return a YAML scalar as the text a properties file would hold.

    YAML turns ``8080`` into an int and ``true`` into a bool; both are
    written back the way they would appear in a properties file.

    Raises:
        TypeError: If value is not a string, number or boolean.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise TypeError(f"{config_key} must be a string, number or boolean")
