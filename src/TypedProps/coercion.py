"""Text grammars for coercing property values.

Every function here takes the raw property text and returns a typed value,
raising ``ValueError`` (or ``OverflowError`` for fixed-width range checks)
when the text does not match the grammar. Key lookup and error wrapping live
in ``TypedProps.accessors``; these functions know nothing about keys.
"""

from __future__ import annotations

import ipaddress
import re
import socket
import uuid
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Final
from urllib.parse import SplitResult, urlsplit

from dateutil import parser as dt_parser

InetAddress = ipaddress.IPv4Address | ipaddress.IPv6Address

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

_RE_INTEGER = re.compile(r"[+-]?[0-9]+")
_RE_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_RE_UUID = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_RE_DURATION = re.compile(
    r"(?P<sign>[-+]?)P"
    r"(?:(?P<days>[-+]?[0-9]+)D)?"
    r"(?P<time>T"
    r"(?:(?P<hours>[-+]?[0-9]+)H)?"
    r"(?:(?P<minutes>[-+]?[0-9]+)M)?"
    r"(?:(?P<seconds>[-+]?[0-9]+)(?:[.,](?P<fraction>[0-9]{0,9}))?S)?"
    r")?",
    re.IGNORECASE,
)
_RE_OFFSET_DATE_TIME = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}T(?:[01][0-9]|2[0-3]):[0-9]{2}"
    r"(?::[0-9]{2}(?:[.,][0-9]{1,9})?)?"
    r"(?:Z|[+-][0-9]{2}:[0-9]{2})",
    re.IGNORECASE,
)
_RE_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*")
_RE_HEX2 = re.compile(r"[0-9A-Fa-f]{2}")
_RE_BRACKETED_HOST = re.compile(r"\[[^\[\]]+\](?::[0-9]*)?")

_URI_ILLEGAL = frozenset('"<>\\^`{|}')


def parse_boolean(text: str) -> bool:
    """Parse ``true``/``false`` ignoring case."""
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError(f"Expected 'true' or 'false', got '{text}'")


def parse_big_integer(text: str) -> int:
    """Parse a signed base-10 integer literal of any magnitude.

    Args:
        text: Raw property text.

    Returns:
        Parsed integer.

    Raises:
        ValueError: If the text is not an optionally signed run of ASCII digits.
    """
    if not _RE_INTEGER.fullmatch(text):
        raise ValueError(f"Invalid integer literal: '{text}'")
    return int(text)


def check_range(value: int, minimum: int, maximum: int) -> int:
    """Return value if it lies in ``[minimum, maximum]``.

    Raises:
        OverflowError: If the value does not fit.
    """
    if value < minimum or value > maximum:
        raise OverflowError(f"Integer {value} out of range [{minimum}, {maximum}]")
    return value


def parse_int32(text: str) -> int:
    """Parse an integer that must fit in 32 bits."""
    return check_range(parse_big_integer(text), INT32_MIN, INT32_MAX)


def parse_int64(text: str) -> int:
    """Parse an integer that must fit in 64 bits."""
    return check_range(parse_big_integer(text), INT64_MIN, INT64_MAX)


def parse_big_decimal(text: str) -> Decimal:
    """Parse a decimal literal with optional fraction and exponent.

    NaN, infinities and underscores are rejected even though ``Decimal``
    itself accepts them.

    Args:
        text: Raw property text.

    Returns:
        Exact decimal value.

    Raises:
        ValueError: If the text is not a decimal literal.
    """
    if not _RE_DECIMAL.fullmatch(text):
        raise ValueError(f"Invalid decimal literal: '{text}'")
    return Decimal(text)


def parse_double(text: str) -> float:
    """Parse a decimal literal and narrow it to a 64-bit float."""
    return float(parse_big_decimal(text))


def parse_string(text: str) -> str:
    return text


def parse_uri(text: str) -> SplitResult:
    """Parse a URI reference.

    The reference may be absolute or relative. Characters that can never
    appear in a URI, malformed percent escapes and malformed schemes are
    rejected before the text is split into components.

    Args:
        text: Raw property text.

    Returns:
        The split URI components.

    Raises:
        ValueError: If the text violates URI syntax.
    """
    for index, ch in enumerate(text):
        if ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F or ch in _URI_ILLEGAL:
            raise ValueError(f"Illegal character in URI at index {index}: {text}")
        if ch == "%" and not _RE_HEX2.fullmatch(text[index + 1 : index + 3]):
            raise ValueError(f"Malformed escape pair at index {index}: {text}")
    if text.count("#") > 1:
        raise ValueError(f"Illegal character in fragment at index {text.rindex('#')}: {text}")

    # A colon before any of "/?#" introduces a scheme.
    head = re.split(r"[/?#]", text, maxsplit=1)[0]
    if ":" in head:
        scheme, _, rest = text.partition(":")
        if not scheme:
            raise ValueError(f"Expected scheme name at index 0: {text}")
        if not _RE_SCHEME.fullmatch(scheme):
            raise ValueError(f"Illegal character in scheme name: {text}")
        if not rest or rest.startswith("#"):
            raise ValueError(f"Expected scheme-specific part at index {len(scheme) + 1}: {text}")

    parts = urlsplit(text)
    for name, value in (("path", parts.path), ("query", parts.query), ("fragment", parts.fragment)):
        if "[" in value or "]" in value:
            raise ValueError(f"Illegal character in {name}: {text}")
    userinfo, _, host = parts.netloc.rpartition("@")
    if "[" in userinfo or "]" in userinfo:
        raise ValueError(f"Illegal character in authority: {text}")
    if ("[" in host or "]" in host) and not _RE_BRACKETED_HOST.fullmatch(host):
        raise ValueError(f"Illegal character in authority: {text}")
    return parts


def parse_uuid(text: str) -> uuid.UUID:
    """Parse a hyphenated ``8-4-4-4-12`` hex UUID."""
    if not _RE_UUID.fullmatch(text):
        raise ValueError(f"Invalid UUID string: {text}")
    return uuid.UUID(text)


def _literal_address(text: str) -> InetAddress | None:
    # Brackets only enclose IPv6 literals.
    if text.startswith("[") and text.endswith("]"):
        try:
            return ipaddress.IPv6Address(text[1:-1])
        except ValueError as e:
            raise ValueError(f"Invalid IPv6 address literal: {text}") from e
    try:
        return ipaddress.ip_address(text)
    except ValueError:
        return None


def resolve_inet_address(text: str) -> InetAddress:
    """Resolve a literal IP address or hostname.

    Literal addresses never touch the network. Anything else is looked up
    with ``socket.getaddrinfo``, which blocks for as long as name resolution
    takes.

    Args:
        text: Raw property text.

    Returns:
        The literal address, or the first address the resolver returned.

    Raises:
        ValueError: If the text is empty or not a valid host name.
        OSError: If name resolution fails.
    """
    if not text:
        raise ValueError("Empty host name")
    literal = _literal_address(text)
    if literal is not None:
        return literal
    infos = socket.getaddrinfo(text, None)
    if not infos:
        raise OSError(f"No addresses found for host: {text}")
    return ipaddress.ip_address(infos[0][4][0])


def _signed_int(value: str | None) -> int:
    return int(value) if value else 0


def parse_duration(text: str) -> timedelta:
    """Parse an ISO-8601 duration of the form ``PnDTnHnMn.nS``.

    Years, months and weeks are not accepted. Each part may carry its own
    sign, and a leading ``-`` negates the whole duration. Fractions of a
    second finer than a microsecond are truncated.

    Args:
        text: Raw property text, e.g. ``PT15M`` or ``-P2DT3H``.

    Returns:
        The duration as a timedelta.

    Raises:
        ValueError: If the text is not a supported ISO-8601 duration.
    """
    match = _RE_DURATION.fullmatch(text)
    if match is None:
        raise ValueError(f"Text cannot be parsed to a Duration: {text}")
    parts = match.group("days", "hours", "minutes", "seconds")
    if all(part is None for part in parts) or match.group("time") in ("T", "t"):
        raise ValueError(f"Text cannot be parsed to a Duration: {text}")

    seconds_text = match.group("seconds") or ""
    fraction = (match.group("fraction") or "").ljust(9, "0")
    nanos = int(fraction)
    if seconds_text.startswith("-"):
        nanos = -nanos
    micros = nanos // 1000 if nanos >= 0 else -(-nanos // 1000)

    try:
        result = timedelta(
            days=_signed_int(match.group("days")),
            hours=_signed_int(match.group("hours")),
            minutes=_signed_int(match.group("minutes")),
            seconds=_signed_int(match.group("seconds")),
            microseconds=micros,
        )
        return -result if match.group("sign") == "-" else result
    except OverflowError as e:
        raise ValueError(f"Text cannot be parsed to a Duration: {text}") from e


def parse_offset_date_time(text: str) -> datetime:
    """Parse an ISO-8601 date-time that carries a UTC offset.

    Args:
        text: Raw property text, e.g. ``2000-01-01T00:00:00+00:20``.

    Returns:
        A timezone-aware datetime.

    Raises:
        ValueError: If the text is not an offset date-time.
    """
    if not _RE_OFFSET_DATE_TIME.fullmatch(text):
        raise ValueError(f"Text '{text}' could not be parsed as an offset date-time")
    parsed = dt_parser.isoparse(text.upper())
    if parsed.tzinfo is None:
        raise ValueError(f"Text '{text}' has no UTC offset")
    return parsed
