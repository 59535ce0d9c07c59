"""Accumulating parse results.

A parse result is either a ``Success`` holding a value or a ``Failure``
holding the exception that stopped parsing. Both carry the warnings and
errors accumulated so far, in the order the steps were combined.

``flat_map`` short-circuits: once a chain has failed, later steps are never
evaluated and their diagnostics never appear. Aggregation that keeps going
past failures is ``TypedProps.parsing.functions.all_of``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

A = TypeVar("A")
B = TypeVar("B")


class Kind(Enum):
    """The two kinds of parse result."""

    SUCCESS = "success"
    FAILURE = "failure"


class Unit(Enum):
    """Placeholder value carried by results that only publish diagnostics."""

    UNIT = "unit"


@dataclass(frozen=True, slots=True)
class ParseWarning:
    """A non-fatal diagnostic."""

    message: str


@dataclass(frozen=True, slots=True)
class ParseError:
    """A fatal diagnostic."""

    message: str


@dataclass(frozen=True, slots=True)
class Success(Generic[A]):
    """A parse step that produced a value.

    Attributes:
        result: The parsed value.
        warnings: Warnings accumulated up to and including this step.
        errors: Errors accumulated so far; normally empty.
    """

    result: A
    warnings: tuple[ParseWarning, ...] = ()
    errors: tuple[ParseError, ...] = ()

    @property
    def kind(self) -> Kind:
        return Kind.SUCCESS

    def flat_map(self, f: Callable[[A], ParseResult[B]]) -> ParseResult[B]:
        """Apply ``f`` to the value and merge diagnostics.

        Args:
            f: Next parse step, given this step's value.

        Returns:
            The next step's outcome, with this step's warnings and errors
            placed before the next step's own.
        """
        following = f(self.result)
        warnings = self.warnings + following.warnings
        errors = self.errors + following.errors
        match following.kind:
            case Kind.SUCCESS:
                return Success(following.result, warnings, errors)
            case Kind.FAILURE:
                return Failure(following.exception, warnings, errors)
        raise AssertionError(f"Unknown result kind: {following.kind}")

    def and_then(self, supplier: Callable[[], ParseResult[B]]) -> ParseResult[B]:
        """Sequence another step, ignoring this step's value."""
        return self.flat_map(lambda _ignored: supplier())

    def map(self, f: Callable[[A], B]) -> ParseResult[B]:
        """Transform the value, keeping diagnostics."""
        return Success(f(self.result), self.warnings, self.errors)


@dataclass(frozen=True, slots=True)
class Failure(Generic[A]):
    """A parse step that failed.

    Attributes:
        exception: The exception that caused the failure.
        warnings: Warnings accumulated before the failure.
        errors: Errors describing the failure; never empty.
    """

    exception: BaseException
    warnings: tuple[ParseWarning, ...] = ()
    errors: tuple[ParseError, ...] = ()

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("Failure requires at least one error")

    @property
    def kind(self) -> Kind:
        return Kind.FAILURE

    def flat_map(self, f: Callable[[A], ParseResult[B]]) -> ParseResult[B]:
        return self  # type: ignore[return-value]

    def and_then(self, supplier: Callable[[], ParseResult[B]]) -> ParseResult[B]:
        return self  # type: ignore[return-value]

    def map(self, f: Callable[[A], B]) -> ParseResult[B]:
        return self  # type: ignore[return-value]


ParseResult = Union[Success[A], Failure[A]]
