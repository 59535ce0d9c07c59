"""Accumulating parse layer over the typed accessors."""

from __future__ import annotations

from TypedProps.parsing.functions import (
    FORMATS,
    ParseAggregateError,
    all_of,
    fail,
    parse_any,
    parse_any_optional,
    parse_any_with_default,
    parse_big_decimal,
    parse_big_decimal_with_default,
    parse_big_integer,
    parse_big_integer_with_default,
    parse_boolean,
    parse_boolean_with_default,
    parse_double,
    parse_double_with_default,
    parse_duration,
    parse_duration_with_default,
    parse_inet_address,
    parse_inet_address_with_default,
    parse_integer,
    parse_integer_with_default,
    parse_long,
    parse_long_with_default,
    parse_offset_date_time,
    parse_offset_date_time_with_default,
    parse_string,
    parse_string_optional,
    parse_string_with_default,
    parse_typed,
    parse_typed_optional,
    parse_typed_with_default,
    parse_uri,
    parse_uri_with_default,
    parse_uuid,
    parse_uuid_with_default,
    success_of,
    warn,
)
from TypedProps.parsing.result import (
    Failure,
    Kind,
    ParseError,
    ParseResult,
    ParseWarning,
    Success,
    Unit,
)

__all__ = [
    "Failure",
    "Kind",
    "ParseError",
    "ParseResult",
    "ParseWarning",
    "Success",
    "Unit",
    "FORMATS",
    "ParseAggregateError",
    "all_of",
    "fail",
    "parse_any",
    "parse_any_optional",
    "parse_any_with_default",
    "parse_big_decimal",
    "parse_big_decimal_with_default",
    "parse_big_integer",
    "parse_big_integer_with_default",
    "parse_boolean",
    "parse_boolean_with_default",
    "parse_double",
    "parse_double_with_default",
    "parse_duration",
    "parse_duration_with_default",
    "parse_inet_address",
    "parse_inet_address_with_default",
    "parse_integer",
    "parse_integer_with_default",
    "parse_long",
    "parse_long_with_default",
    "parse_offset_date_time",
    "parse_offset_date_time_with_default",
    "parse_string",
    "parse_string_optional",
    "parse_string_with_default",
    "parse_typed",
    "parse_typed_optional",
    "parse_typed_with_default",
    "parse_uri",
    "parse_uri_with_default",
    "parse_uuid",
    "parse_uuid_with_default",
    "success_of",
    "warn",
]
