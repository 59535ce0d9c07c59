"""Loading of ``key=value`` properties text.

Implements the standard properties grammar:

* natural lines end at ``\\n``, ``\\r`` or ``\\r\\n``;
* blank lines and lines starting with ``#`` or ``!`` are skipped;
* an odd number of trailing backslashes joins the next line, whose leading
  whitespace is dropped;
* the key ends at the first unescaped ``=``, ``:`` or whitespace;
* ``\\t \\n \\r \\f`` and ``\\uXXXX`` are escapes, any other escaped
  character stands for itself.

Files are decoded as ISO-8859-1; anything outside Latin-1 is written with
``\\uXXXX`` escapes.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import BinaryIO, Iterator

from dotenv import dotenv_values

from TypedProps.utils.log import log

ENCODING = "iso-8859-1"

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}

_RE_NEWLINE = re.compile(r"\r\n|\r|\n")
_RE_HEX4 = re.compile(r"[0-9A-Fa-f]{4}")
_RE_SURROGATE_PAIR = re.compile("[\ud800-\udbff][\udc00-\udfff]")


def _logical_lines(text: str) -> Iterator[str]:
    """Yield logical lines with comments, blanks and continuations resolved."""
    pending: str | None = None
    for natural in _RE_NEWLINE.split(text):
        line = natural.lstrip(_WHITESPACE)
        if pending is None and (not line or line[0] in "#!"):
            continue
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending = (pending or "") + line[:-1]
            continue
        yield (pending or "") + line
        pending = None
    if pending is not None:
        yield pending


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into raw (still escaped) key and value."""
    limit = len(line)
    key_end = 0
    value_start = limit
    has_separator = False
    escaped = False
    while key_end < limit:
        ch = line[key_end]
        if not escaped and ch in _SEPARATORS:
            value_start = key_end + 1
            has_separator = True
            break
        if not escaped and ch in _WHITESPACE:
            value_start = key_end + 1
            break
        escaped = (not escaped) if ch == "\\" else False
        key_end += 1

    while value_start < limit:
        ch = line[value_start]
        if ch not in _WHITESPACE:
            if has_separator or ch not in _SEPARATORS:
                break
            has_separator = True
        value_start += 1
    return line[:key_end], line[value_start:]


def _combine_surrogates(text: str) -> str:
    return _RE_SURROGATE_PAIR.sub(
        lambda m: m.group().encode("utf-16-le", "surrogatepass").decode("utf-16-le"), text
    )


def unescape(raw: str) -> str:
    """Resolve escapes in a raw key or value.

    Args:
        raw: Key or value text as it appears in the file.

    Returns:
        The unescaped text.

    Raises:
        ValueError: If a ``\\u`` escape is not followed by four hex digits.
    """
    out: list[str] = []
    index = 0
    limit = len(raw)
    while index < limit:
        ch = raw[index]
        index += 1
        if ch != "\\":
            out.append(ch)
            continue
        if index >= limit:
            break
        ch = raw[index]
        index += 1
        if ch == "u":
            digits = raw[index : index + 4]
            if not _RE_HEX4.fullmatch(digits):
                raise ValueError("Malformed \\uxxxx encoding.")
            out.append(chr(int(digits, 16)))
            index += 4
        else:
            out.append(_ESCAPES.get(ch, ch))
    return _combine_surrogates("".join(out))


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties text into a mapping.

    Args:
        text: Decoded properties text.

    Returns:
        Mapping of key to value; later duplicates replace earlier ones.

    Raises:
        ValueError: On a malformed ``\\uXXXX`` escape.
    """
    properties: dict[str, str] = {}
    for line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        properties[unescape(raw_key)] = unescape(raw_value)
    return properties


def load_properties(stream: BinaryIO) -> dict[str, str]:
    """Read and parse an ISO-8859-1 encoded properties stream."""
    return parse_properties(stream.read().decode(ENCODING))


def from_file(path: str | Path) -> dict[str, str]:
    """Load a properties file.

    Args:
        path: Path to the file.

    Returns:
        Parsed properties.

    Raises:
        OSError: If the file cannot be read.
        ValueError: On a malformed ``\\uXXXX`` escape.
    """
    file_path = Path(path)
    with file_path.open("rb") as stream:
        properties = load_properties(stream)
    log.debug("Loaded %d properties from %s", len(properties), file_path)
    return properties


def load_env_file(path: str | Path) -> dict[str, str]:
    """Load a dotenv file as a properties mapping.

    Keys declared without a value (a bare ``KEY`` line) are skipped, since
    a properties value is always a string.

    Args:
        path: Path to the dotenv file.

    Returns:
        Mapping of variable name to value. Variable references are expanded
        the way python-dotenv expands them.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Env file not found: {file_path}")
    properties: dict[str, str] = {}
    for key, value in dotenv_values(file_path).items():
        if value is None:
            log.debug("Skipping env key without value: %s", key)
            continue
        properties[key] = value
    log.debug("Loaded %d env entries from %s", len(properties), file_path)
    return properties
