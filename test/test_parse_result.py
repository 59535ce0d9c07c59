"""Tests for the Success/Failure result combinators."""

import sys
import unittest
from dataclasses import FrozenInstanceError
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from TypedProps.parsing import (
    Failure,
    Kind,
    ParseError,
    ParseWarning,
    Success,
    Unit,
    fail,
    success_of,
    warn,
)


class TestFlatMap(unittest.TestCase):
    def test_success_merges_diagnostics_in_order(self) -> None:
        first = Success(1, warnings=(ParseWarning("w0"),))
        result = first.flat_map(lambda x: Success(x + 1, warnings=(ParseWarning("w1"),)))
        self.assertIs(result.kind, Kind.SUCCESS)
        self.assertEqual(result.result, 2)
        self.assertEqual([w.message for w in result.warnings], ["w0", "w1"])
        self.assertEqual(result.errors, ())

    def test_success_into_failure_keeps_prior_warnings(self) -> None:
        cause = RuntimeError("boom")
        first = Success(1, warnings=(ParseWarning("w0"),))
        result = first.flat_map(
            lambda _x: Failure(cause, warnings=(ParseWarning("w1"),), errors=(ParseError("boom"),))
        )
        self.assertIs(result.kind, Kind.FAILURE)
        self.assertIs(result.exception, cause)
        self.assertEqual([w.message for w in result.warnings], ["w0", "w1"])
        self.assertEqual([e.message for e in result.errors], ["boom"])

    def test_failure_short_circuits(self) -> None:
        failed = fail(ValueError("E0"))
        calls: list[object] = []

        def step(value: object) -> Success:
            calls.append(value)
            return warn("never seen")

        result = failed.flat_map(step)
        self.assertEqual(calls, [])
        self.assertIs(result, failed)
        self.assertEqual(result.warnings, ())
        self.assertEqual([e.message for e in result.errors], ["E0"])

    def test_chain_stops_at_first_failure(self) -> None:
        result = (
            warn("before")
            .and_then(lambda: fail(ValueError("E0")))
            .and_then(lambda: warn("after"))
            .and_then(lambda: fail(ValueError("E1")))
        )
        self.assertIs(result.kind, Kind.FAILURE)
        self.assertEqual([w.message for w in result.warnings], ["before"])
        self.assertEqual([e.message for e in result.errors], ["E0"])


class TestMap(unittest.TestCase):
    def test_success_map_keeps_diagnostics(self) -> None:
        result = warn("w").map(lambda unit: unit is Unit.UNIT)
        self.assertEqual(result, Success(True, warnings=(ParseWarning("w"),)))

    def test_failure_map_is_identity(self) -> None:
        failed = fail(ValueError("E0"))
        self.assertIs(failed.map(lambda _x: 1 / 0), failed)


class TestConstruction(unittest.TestCase):
    def test_success_of_none_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            success_of(None)

    def test_success_of(self) -> None:
        self.assertEqual(success_of(23), Success(23))

    def test_warn_with_key(self) -> None:
        result = warn("Warning 1", key="x")
        self.assertEqual(result.result, Unit.UNIT)
        self.assertEqual(result.warnings, (ParseWarning("Key 'x': Warning 1"),))

    def test_warn_key_is_keyword_only(self) -> None:
        with self.assertRaises(TypeError):
            warn("x", "Warning 1")  # type: ignore[misc]

    def test_fail(self) -> None:
        cause = Exception("Error 0")
        result = fail(cause)
        self.assertIs(result.kind, Kind.FAILURE)
        self.assertIs(result.exception, cause)
        self.assertEqual(result.errors, (ParseError("Error 0"),))

    def test_failure_requires_an_error(self) -> None:
        with self.assertRaises(ValueError):
            Failure(Exception("x"))

    def test_results_are_immutable(self) -> None:
        result = success_of(1)
        with self.assertRaises(FrozenInstanceError):
            result.result = 2  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
