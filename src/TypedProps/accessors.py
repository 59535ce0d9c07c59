"""Typed, exception-raising accessors over a properties mapping.

Each supported type has three call shapes:

* ``get_<type>(properties, key)`` raises ``PropertyNonexistent`` when the key
  is absent and ``PropertyIncorrectType`` when the value cannot be coerced.
* ``get_<type>_with_default(properties, key, default)`` returns ``default``
  for an absent key without coercing anything.
* ``get_<type>_optional(properties, key)`` returns ``None`` for an absent key.

A default or optional lookup only suppresses absence. A malformed value is
always ``PropertyIncorrectType``.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Mapping, TypeVar
from urllib.parse import SplitResult

from TypedProps import coercion
from TypedProps.coercion import InetAddress
from TypedProps.errors import PropertyIncorrectType, PropertyNonexistent

T = TypeVar("T")

Properties = Mapping[str, str]


def _check_args(properties: Properties, key: str) -> None:
    if properties is None:
        raise TypeError("properties must not be None")
    if key is None:
        raise TypeError("key must not be None")


def _coerce(key: str, text: str, parse: Callable[[str], T], type_name: str) -> T:
    """Apply a coercion, converting grammar failures into PropertyIncorrectType.

    Args:
        key: Property key, for the error message.
        text: Raw property value.
        parse: Coercion function from ``TypedProps.coercion``.
        type_name: Type name used in the error message.

    Returns:
        Coerced value.

    Raises:
        PropertyIncorrectType: If the coercion fails.
    """
    try:
        return parse(text)
    except (ValueError, OSError) as e:
        raise PropertyIncorrectType(key, text, type_name) from e


def _fixed_width(minimum: int, maximum: int, type_name: str) -> Callable[[str, str], int]:
    def coerce(key: str, text: str) -> int:
        value = _coerce(key, text, coercion.parse_big_integer, "Integer")
        try:
            return coercion.check_range(value, minimum, maximum)
        except OverflowError as e:
            raise PropertyIncorrectType(key, text, type_name) from e

    return coerce


def _simple(parse: Callable[[str], T], type_name: str) -> Callable[[str, str], T]:
    return lambda key, text: _coerce(key, text, parse, type_name)


_BOOLEAN = _simple(coercion.parse_boolean, "Boolean")
_BIG_INTEGER = _simple(coercion.parse_big_integer, "Integer")
_BIG_DECIMAL = _simple(coercion.parse_big_decimal, "Real")
_INTEGER = _fixed_width(coercion.INT32_MIN, coercion.INT32_MAX, "int")
_LONG = _fixed_width(coercion.INT64_MIN, coercion.INT64_MAX, "long")
_DOUBLE = _simple(coercion.parse_double, "Real")
_URI = _simple(coercion.parse_uri, "URI")
_UUID = _simple(coercion.parse_uuid, "UUID")
_INET_ADDRESS = _simple(coercion.resolve_inet_address, "InetAddress")
_DURATION = _simple(coercion.parse_duration, "Duration")
_OFFSET_DATE_TIME = _simple(coercion.parse_offset_date_time, "OffsetDateTime")


def _get(properties: Properties, key: str, coerce: Callable[[str, str], T]) -> T:
    return coerce(key, get_string(properties, key))


def _get_with_default(
    properties: Properties, key: str, default: T, coerce: Callable[[str, str], T]
) -> T:
    _check_args(properties, key)
    if default is None:
        raise TypeError("default must not be None")
    text = properties.get(key)
    if text is None:
        return default
    return coerce(key, text)


def _get_optional(properties: Properties, key: str, coerce: Callable[[str, str], T]) -> T | None:
    _check_args(properties, key)
    text = properties.get(key)
    if text is None:
        return None
    return coerce(key, text)


# String


def get_string(properties: Properties, key: str) -> str:
    """Return the raw value for key.

    Args:
        properties: Properties mapping.
        key: Property key.

    Returns:
        The value, verbatim.

    Raises:
        PropertyNonexistent: If the key is absent.
    """
    _check_args(properties, key)
    value = properties.get(key)
    if value is None:
        raise PropertyNonexistent(key)
    return value


def get_string_with_default(properties: Properties, key: str, default: str) -> str:
    """Return the raw value for key, or ``default`` if absent."""
    return _get_with_default(properties, key, default, lambda _key, text: text)


def get_string_optional(properties: Properties, key: str) -> str | None:
    """Return the raw value for key, or ``None`` if absent."""
    return _get_optional(properties, key, lambda _key, text: text)


# Boolean


def get_boolean(properties: Properties, key: str) -> bool:
    """Return the value for key as a boolean (``true``/``false``, any case)."""
    return _get(properties, key, _BOOLEAN)


def get_boolean_with_default(properties: Properties, key: str, default: bool) -> bool:
    return _get_with_default(properties, key, default, _BOOLEAN)


def get_boolean_optional(properties: Properties, key: str) -> bool | None:
    return _get_optional(properties, key, _BOOLEAN)


# Arbitrary-precision integer


def get_big_integer(properties: Properties, key: str) -> int:
    """Return the value for key as an integer of any magnitude."""
    return _get(properties, key, _BIG_INTEGER)


def get_big_integer_with_default(properties: Properties, key: str, default: int) -> int:
    return _get_with_default(properties, key, default, _BIG_INTEGER)


def get_big_integer_optional(properties: Properties, key: str) -> int | None:
    return _get_optional(properties, key, _BIG_INTEGER)


# Arbitrary-precision decimal


def get_big_decimal(properties: Properties, key: str) -> Decimal:
    """Return the value for key as an exact ``Decimal``."""
    return _get(properties, key, _BIG_DECIMAL)


def get_big_decimal_with_default(properties: Properties, key: str, default: Decimal) -> Decimal:
    return _get_with_default(properties, key, default, _BIG_DECIMAL)


def get_big_decimal_optional(properties: Properties, key: str) -> Decimal | None:
    return _get_optional(properties, key, _BIG_DECIMAL)


# 32-bit integer


def get_integer(properties: Properties, key: str) -> int:
    """Return the value for key as an integer that fits in 32 bits.

    Raises:
        PropertyNonexistent: If the key is absent.
        PropertyIncorrectType: If the value is not an integer, or is out of
            the 32-bit range.
    """
    return _get(properties, key, _INTEGER)


def get_integer_with_default(properties: Properties, key: str, default: int) -> int:
    return _get_with_default(properties, key, default, _INTEGER)


def get_integer_optional(properties: Properties, key: str) -> int | None:
    return _get_optional(properties, key, _INTEGER)


# 64-bit integer


def get_long(properties: Properties, key: str) -> int:
    """Return the value for key as an integer that fits in 64 bits."""
    return _get(properties, key, _LONG)


def get_long_with_default(properties: Properties, key: str, default: int) -> int:
    return _get_with_default(properties, key, default, _LONG)


def get_long_optional(properties: Properties, key: str) -> int | None:
    return _get_optional(properties, key, _LONG)


# Double


def get_double(properties: Properties, key: str) -> float:
    """Return the value for key as a float."""
    return _get(properties, key, _DOUBLE)


def get_double_with_default(properties: Properties, key: str, default: float) -> float:
    return _get_with_default(properties, key, default, _DOUBLE)


def get_double_optional(properties: Properties, key: str) -> float | None:
    return _get_optional(properties, key, _DOUBLE)


# URI


def get_uri(properties: Properties, key: str) -> SplitResult:
    """Return the value for key as split URI components."""
    return _get(properties, key, _URI)


def get_uri_with_default(properties: Properties, key: str, default: SplitResult) -> SplitResult:
    return _get_with_default(properties, key, default, _URI)


def get_uri_optional(properties: Properties, key: str) -> SplitResult | None:
    return _get_optional(properties, key, _URI)


# UUID


def get_uuid(properties: Properties, key: str) -> uuid.UUID:
    """Return the value for key as a UUID."""
    return _get(properties, key, _UUID)


def get_uuid_with_default(properties: Properties, key: str, default: uuid.UUID) -> uuid.UUID:
    return _get_with_default(properties, key, default, _UUID)


def get_uuid_optional(properties: Properties, key: str) -> uuid.UUID | None:
    return _get_optional(properties, key, _UUID)


# Network address


def get_inet_address(properties: Properties, key: str) -> InetAddress:
    """Return the value for key as an IP address.

    Host names are resolved, so this call may block on DNS and may fail for
    transient network reasons as well as for bad input.

    Raises:
        PropertyNonexistent: If the key is absent.
        PropertyIncorrectType: If the value is not a literal address and
            cannot be resolved.
    """
    return _get(properties, key, _INET_ADDRESS)


def get_inet_address_with_default(
    properties: Properties, key: str, default: InetAddress
) -> InetAddress:
    return _get_with_default(properties, key, default, _INET_ADDRESS)


def get_inet_address_optional(properties: Properties, key: str) -> InetAddress | None:
    return _get_optional(properties, key, _INET_ADDRESS)


# Duration


def get_duration(properties: Properties, key: str) -> timedelta:
    """Return the value for key as an ISO-8601 duration such as ``PT15M``."""
    return _get(properties, key, _DURATION)


def get_duration_with_default(properties: Properties, key: str, default: timedelta) -> timedelta:
    return _get_with_default(properties, key, default, _DURATION)


def get_duration_optional(properties: Properties, key: str) -> timedelta | None:
    return _get_optional(properties, key, _DURATION)


# Offset date-time


def get_offset_date_time(properties: Properties, key: str) -> datetime:
    """Return the value for key as a timezone-aware datetime."""
    return _get(properties, key, _OFFSET_DATE_TIME)


def get_offset_date_time_with_default(
    properties: Properties, key: str, default: datetime
) -> datetime:
    return _get_with_default(properties, key, default, _OFFSET_DATE_TIME)


def get_offset_date_time_optional(properties: Properties, key: str) -> datetime | None:
    return _get_optional(properties, key, _OFFSET_DATE_TIME)


ACCESSORS: dict[str, Callable[[Properties, str], Any]] = {
    "boolean": get_boolean,
    "big_integer": get_big_integer,
    "big_decimal": get_big_decimal,
    "integer": get_integer,
    "long": get_long,
    "double": get_double,
    "string": get_string,
    "uri": get_uri,
    "uuid": get_uuid,
    "inet_address": get_inet_address,
    "duration": get_duration,
    "offset_date_time": get_offset_date_time,
}
