"""Writing properties text that ``parse_properties`` reads back unchanged."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from TypedProps.properties.loader import ENCODING
from TypedProps.utils.log import log

_SPECIAL = {"\t": "\\t", "\n": "\\n", "\r": "\\r", "\f": "\\f", "\\": "\\\\"}
_ESCAPED_PUNCTUATION = "=:#!"


def _escape_unicode(ch: str) -> str:
    encoded = ch.encode("utf-16-be", "surrogatepass")
    units = [encoded[i : i + 2].hex().upper() for i in range(0, len(encoded), 2)]
    return "".join(f"\\u{unit}" for unit in units)


def _comment_text(text: str) -> str:
    return "".join(_escape_unicode(ch) if ord(ch) < 0x20 or ord(ch) > 0xFF else ch for ch in text)


def escape(text: str, *, is_key: bool) -> str:
    """Escape a key or value for a properties file.

    Args:
        text: Text to escape.
        is_key: Keys escape every space; values only a leading one.

    Returns:
        Escaped ASCII text.
    """
    out: list[str] = []
    for index, ch in enumerate(text):
        if ch == " ":
            out.append("\\ " if index == 0 or is_key else " ")
        elif ch in _SPECIAL:
            out.append(_SPECIAL[ch])
        elif ch in _ESCAPED_PUNCTUATION:
            out.append("\\" + ch)
        elif ord(ch) < 0x20 or ord(ch) > 0x7E:
            out.append(_escape_unicode(ch))
        else:
            out.append(ch)
    return "".join(out)


def format_properties(properties: Mapping[str, str], comment: str | None = None) -> str:
    """Render properties as text, one ``key=value`` line per key, sorted by key.

    Args:
        properties: Mapping to render.
        comment: Optional header; each of its lines becomes a ``#`` comment.

    Returns:
        Properties text ending with a newline.
    """
    lines: list[str] = []
    if comment is not None:
        lines.extend(f"#{_comment_text(part)}" for part in comment.splitlines() or [""])
    for key in sorted(properties):
        lines.append(f"{escape(key, is_key=True)}={escape(properties[key], is_key=False)}")
    return "\n".join(lines) + "\n"


def store_properties(properties: Mapping[str, str], path: str | Path, comment: str | None = None) -> None:
    """Write properties to an ISO-8859-1 file, replacing it."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(format_properties(properties, comment), encoding=ENCODING)
    log.debug("Stored %d properties to %s", len(properties), file_path)
