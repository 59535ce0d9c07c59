"""Parse functions producing accumulating results.

Nothing in this module raises for bad data. Missing keys, malformed values
and exceptions thrown by caller-supplied parsers all come back as
``Failure`` results; ``_attempt`` is the one place exceptions become data.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Mapping, TypeVar
from urllib.parse import SplitResult

from TypedProps import accessors, coercion
from TypedProps.coercion import InetAddress
from TypedProps.parsing.result import (
    Failure,
    Kind,
    ParseError,
    ParseResult,
    ParseWarning,
    Success,
    Unit,
)

T = TypeVar("T")

Properties = Mapping[str, str]
ParseFunction = Callable[[str, str], T]
"""Parser given ``(key, text)``; raises any exception on bad input."""


class ParseAggregateError(Exception):
    """Cause attached to the failure produced by ``all_of``."""

    pass


def _attempt(action: Callable[[], T], describe: Callable[[Exception], str] | None = None) -> ParseResult[T]:
    """Run ``action`` and capture its outcome as a parse result.

    Args:
        action: Zero-argument callable producing the value.
        describe: Builds the error message from the exception. Defaults to
            ``str(exception)``.

    Returns:
        Success with the value, or Failure with one error and the exception.
    """
    try:
        return Success(action())
    except Exception as e:  # noqa: BLE001 - parse results carry the exception
        message = describe(e) if describe else str(e)
        return Failure(e, errors=(ParseError(message),))


def _could_not_parse(key: str, text: str, fmt: str) -> Callable[[Exception], str]:
    return lambda e: f"Key '{key}' with value '{text}' could not be parsed as {fmt}: {e}"


def _parse_text(key: str, text: str, fmt: str, parser: ParseFunction[T]) -> ParseResult[T]:
    return _attempt(lambda: parser(key, text), _could_not_parse(key, text, fmt))


def parse_any(properties: Properties, key: str, fmt: str, parser: ParseFunction[T]) -> ParseResult[T]:
    """Look up ``key`` and parse its text with ``parser``.

    Args:
        properties: Properties mapping.
        key: Property key.
        fmt: Name of the target format for error messages, worded like
            "a URI" or "an ISO duration".
        parser: Called as ``parser(key, text)``.

    Returns:
        Success with the parsed value; Failure if the key is absent or the
        parser raised.
    """
    return parse_string(properties, key).flat_map(lambda text: _parse_text(key, text, fmt, parser))


def parse_any_optional(
    properties: Properties, key: str, fmt: str, parser: ParseFunction[T]
) -> ParseResult[T | None]:
    """Like ``parse_any`` but an absent key succeeds with ``None``."""

    def parse_present(text: str | None) -> ParseResult[T | None]:
        if text is None:
            return Success(None)
        return _parse_text(key, text, fmt, parser)

    return parse_string_optional(properties, key).flat_map(parse_present)


def parse_any_with_default(
    properties: Properties, key: str, fmt: str, default: T, parser: ParseFunction[T]
) -> ParseResult[T]:
    """Like ``parse_any`` but an absent key succeeds with ``default``."""
    return parse_any_optional(properties, key, fmt, parser).flat_map(
        lambda value: success_of(default if value is None else value)
    )


def _text_parser(parse: Callable[[str], T]) -> ParseFunction[T]:
    return lambda _key, text: parse(text)


# Format labels and text parsers for the typed wrappers, by type name.
FORMATS: dict[str, tuple[str, ParseFunction[Any]]] = {
    "boolean": ("a Boolean", _text_parser(coercion.parse_boolean)),
    "big_integer": ("a BigInteger", _text_parser(coercion.parse_big_integer)),
    "big_decimal": ("a BigDecimal", _text_parser(coercion.parse_big_decimal)),
    "integer": ("a 32-bit integer", _text_parser(coercion.parse_int32)),
    "long": ("a 64-bit integer", _text_parser(coercion.parse_int64)),
    "double": ("a double", _text_parser(coercion.parse_double)),
    "string": ("a string", _text_parser(coercion.parse_string)),
    "uri": ("a URI", _text_parser(coercion.parse_uri)),
    "uuid": ("a UUID", _text_parser(coercion.parse_uuid)),
    "inet_address": ("a network address", _text_parser(coercion.resolve_inet_address)),
    "duration": ("an ISO duration", _text_parser(coercion.parse_duration)),
    "offset_date_time": ("an ISO offset date-time", _text_parser(coercion.parse_offset_date_time)),
}


def parse_typed(properties: Properties, key: str, type_name: str) -> ParseResult[Any]:
    """Parse ``key`` as one of the types named in ``FORMATS``."""
    fmt, parser = FORMATS[type_name]
    return parse_any(properties, key, fmt, parser)


def parse_typed_with_default(
    properties: Properties, key: str, type_name: str, default: Any
) -> ParseResult[Any]:
    fmt, parser = FORMATS[type_name]
    return parse_any_with_default(properties, key, fmt, default, parser)


def parse_typed_optional(properties: Properties, key: str, type_name: str) -> ParseResult[Any]:
    fmt, parser = FORMATS[type_name]
    return parse_any_optional(properties, key, fmt, parser)


# Strings come straight from the accessor library.


def parse_string(properties: Properties, key: str) -> ParseResult[str]:
    return _attempt(lambda: accessors.get_string(properties, key))


def parse_string_optional(properties: Properties, key: str) -> ParseResult[str | None]:
    return _attempt(lambda: accessors.get_string_optional(properties, key))


def parse_string_with_default(properties: Properties, key: str, default: str) -> ParseResult[str]:
    return _attempt(lambda: accessors.get_string_with_default(properties, key, default))


def parse_boolean(properties: Properties, key: str) -> ParseResult[bool]:
    return parse_typed(properties, key, "boolean")


def parse_boolean_with_default(properties: Properties, key: str, default: bool) -> ParseResult[bool]:
    return parse_typed_with_default(properties, key, "boolean", default)


def parse_big_integer(properties: Properties, key: str) -> ParseResult[int]:
    return parse_typed(properties, key, "big_integer")


def parse_big_integer_with_default(properties: Properties, key: str, default: int) -> ParseResult[int]:
    return parse_typed_with_default(properties, key, "big_integer", default)


def parse_big_decimal(properties: Properties, key: str) -> ParseResult[Decimal]:
    return parse_typed(properties, key, "big_decimal")


def parse_big_decimal_with_default(
    properties: Properties, key: str, default: Decimal
) -> ParseResult[Decimal]:
    return parse_typed_with_default(properties, key, "big_decimal", default)


def parse_integer(properties: Properties, key: str) -> ParseResult[int]:
    return parse_typed(properties, key, "integer")


def parse_integer_with_default(properties: Properties, key: str, default: int) -> ParseResult[int]:
    return parse_typed_with_default(properties, key, "integer", default)


def parse_long(properties: Properties, key: str) -> ParseResult[int]:
    return parse_typed(properties, key, "long")


def parse_long_with_default(properties: Properties, key: str, default: int) -> ParseResult[int]:
    return parse_typed_with_default(properties, key, "long", default)


def parse_double(properties: Properties, key: str) -> ParseResult[float]:
    return parse_typed(properties, key, "double")


def parse_double_with_default(properties: Properties, key: str, default: float) -> ParseResult[float]:
    return parse_typed_with_default(properties, key, "double", default)


def parse_uri(properties: Properties, key: str) -> ParseResult[SplitResult]:
    return parse_typed(properties, key, "uri")


def parse_uri_with_default(
    properties: Properties, key: str, default: SplitResult
) -> ParseResult[SplitResult]:
    return parse_typed_with_default(properties, key, "uri", default)


def parse_uuid(properties: Properties, key: str) -> ParseResult[uuid.UUID]:
    return parse_typed(properties, key, "uuid")


def parse_uuid_with_default(properties: Properties, key: str, default: uuid.UUID) -> ParseResult[uuid.UUID]:
    return parse_typed_with_default(properties, key, "uuid", default)


def parse_inet_address(properties: Properties, key: str) -> ParseResult[InetAddress]:
    """Parse a network address; host names are resolved and may block."""
    return parse_typed(properties, key, "inet_address")


def parse_inet_address_with_default(
    properties: Properties, key: str, default: InetAddress
) -> ParseResult[InetAddress]:
    return parse_typed_with_default(properties, key, "inet_address", default)


def parse_duration(properties: Properties, key: str) -> ParseResult[timedelta]:
    return parse_typed(properties, key, "duration")


def parse_duration_with_default(
    properties: Properties, key: str, default: timedelta
) -> ParseResult[timedelta]:
    return parse_typed_with_default(properties, key, "duration", default)


def parse_offset_date_time(properties: Properties, key: str) -> ParseResult[datetime]:
    return parse_typed(properties, key, "offset_date_time")


def parse_offset_date_time_with_default(
    properties: Properties, key: str, default: datetime
) -> ParseResult[datetime]:
    return parse_typed_with_default(properties, key, "offset_date_time", default)


def success_of(result: T) -> ParseResult[T]:
    """Trivially succeed with ``result``.

    Raises:
        TypeError: If ``result`` is None.
    """
    if result is None:
        raise TypeError("result must not be None")
    return Success(result)


def warn(message: str, *, key: str | None = None) -> ParseResult[Unit]:
    """Publish a warning, optionally attributed to ``key``.

    Args:
        message: Warning text.
        key: If given, the message becomes ``Key '<key>': <message>``.

    Returns:
        A success carrying ``Unit.UNIT`` and exactly one warning.
    """
    if message is None:
        raise TypeError("message must not be None")
    text = message if key is None else f"Key '{key}': {message}"
    return Success(Unit.UNIT, warnings=(ParseWarning(text),))


def fail(exception: BaseException) -> ParseResult[Unit]:
    """Publish an error built from ``exception``."""
    return Failure(exception, errors=(ParseError(str(exception)),))


def all_of(operations: Iterable[ParseResult[T]]) -> ParseResult[list[T]]:
    """Combine already-evaluated results without short-circuiting.

    If every operation succeeded, the result is a success holding each
    value in input order (``Unit`` values from ``warn`` included) and the
    warnings of every operation in input order. Otherwise it is a failure
    holding the warnings and errors of every operation, successes and
    failures alike, in input order, caused by a single ``ParseAggregateError``.

    Args:
        operations: Results to combine.

    Returns:
        The combined result.
    """
    if operations is None:
        raise TypeError("operations must not be None")
    results = list(operations)
    warnings = tuple(w for r in results for w in r.warnings)

    if all(r.kind is Kind.SUCCESS for r in results):
        return Success([r.result for r in results], warnings=warnings)

    errors = tuple(e for r in results for e in r.errors)
    return Failure(
        ParseAggregateError("At least one operation failed!"),
        warnings=warnings,
        errors=errors,
    )
