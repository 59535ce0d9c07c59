"""Property lookup error classes.

Callers catch on the two leaf kinds: a key that is absent, and a key whose
value cannot be coerced to the requested type.
"""

from __future__ import annotations


class PropertyError(Exception):
    """Base exception for property lookup errors."""

    pass


class PropertyNonexistent(PropertyError):
    """Raised when a requested key is not present in the properties."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Key not found in properties: {key}")
        self.key = key


class PropertyIncorrectType(PropertyError):
    """Raised when a value is present but cannot be parsed as the requested type.

    The underlying parse or range exception, where one exists, is chained as
    ``__cause__`` by the raising accessor.
    """

    def __init__(self, key: str, value: str, type_name: str) -> None:
        super().__init__(f"Value for key {key} ({value}) cannot be parsed as type {type_name}")
        self.key = key
        self.value = value
        self.type_name = type_name
