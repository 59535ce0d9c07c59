"""Service layer for TypedProps commands.

Provides source loading shared by the CLI commands and the schema check.
"""

from __future__ import annotations

from pathlib import Path

from TypedProps.properties import from_file, load_env_file
from TypedProps.services.check import check_properties


def load_source(path: Path, *, env: bool = False) -> dict[str, str]:
    """Load a properties source from a properties file or a dotenv file.

    Args:
        path: File to load.
        env: Read the file as dotenv instead of properties text.

    Returns:
        Mapping of key to value.
    """
    if env:
        return load_env_file(path)
    return from_file(path)


__all__ = [
    "check_properties",
    "load_source",
]
