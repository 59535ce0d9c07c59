"""Tests for the text grammars behind each coercion."""

import ipaddress
import sys
import unittest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from TypedProps import coercion


class TestIntegerGrammar(unittest.TestCase):
    def test_accepts_signed_digits(self) -> None:
        self.assertEqual(coercion.parse_big_integer("+42"), 42)
        self.assertEqual(coercion.parse_big_integer("-0"), 0)
        self.assertEqual(coercion.parse_big_integer("007"), 7)

    def test_rejects_what_int_would_accept(self) -> None:
        for text in [" 1", "1 ", "1_000", "", "+", "0x10", "١٢"]:
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    coercion.parse_big_integer(text)

    def test_range_check(self) -> None:
        self.assertEqual(coercion.parse_int64(str(coercion.INT64_MAX)), coercion.INT64_MAX)
        with self.assertRaises(OverflowError):
            coercion.parse_int64(str(coercion.INT64_MIN - 1))
        with self.assertRaises(OverflowError):
            coercion.parse_int32("232323232323232323")


class TestDecimalGrammar(unittest.TestCase):
    def test_accepts(self) -> None:
        cases = {
            "1": Decimal("1"),
            "-1.5": Decimal("-1.5"),
            "1.": Decimal("1"),
            ".5": Decimal("0.5"),
            "1e10": Decimal("1e10"),
            "+2.5E-3": Decimal("0.0025"),
        }
        for text, expected in cases.items():
            with self.subTest(text=text):
                self.assertEqual(coercion.parse_big_decimal(text), expected)

    def test_rejects(self) -> None:
        for text in ["NaN", "Infinity", "1_0", ".", "e5", "1e", "1.2.3", " 1"]:
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    coercion.parse_big_decimal(text)

    def test_double_overflow_narrows_to_infinity(self) -> None:
        self.assertEqual(coercion.parse_double("1e400"), float("inf"))


class TestUriGrammar(unittest.TestCase):
    def test_accepts_references(self) -> None:
        for text in [
            "http://www.example.com",
            "mailto:someone@example.com",
            "urn:isbn:0451450523",
            "relative/path?q=1",
            "/absolute/path",
            "//host:8080/p",
            "http://[::1]:80/",
            "file:///tmp/x%20y",
            "",
        ]:
            with self.subTest(text=text):
                self.assertEqual(coercion.parse_uri(text).geturl(), text)

    def test_rejects_bad_syntax(self) -> None:
        for text in [
            " not a uri",
            "http://exa mple.com",
            "http://example.com/<x>",
            "http://example.com/%zz",
            "http://example.com/%4",
            "a#b#c",
            "http:",
            "://missing",
            "1http://example.com",
            "http://[::1/",
            "http://host/a[b]",
            "http://host/p?q=[1]",
            "http://host/p#[f]",
            "http://us[er]@host/",
            "http://h[o]st/",
            "mailto:a[b]@example.com",
        ]:
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    coercion.parse_uri(text)


class TestUuidGrammar(unittest.TestCase):
    def test_requires_canonical_form(self) -> None:
        coercion.parse_uuid("14F303B0-7A5D-49B6-B7B2-D4BC678E5FD8")
        for text in [
            "14f303b07a5d49b6b7b2d4bc678e5fd8",
            "{14f303b0-7a5d-49b6-b7b2-d4bc678e5fd8}",
            "urn:uuid:14f303b0-7a5d-49b6-b7b2-d4bc678e5fd8",
            "1-1-1-1-1",
        ]:
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    coercion.parse_uuid(text)


class TestDurationGrammar(unittest.TestCase):
    def test_accepts(self) -> None:
        cases = {
            "PT15M": timedelta(minutes=15),
            "PT10S": timedelta(seconds=10),
            "P2D": timedelta(days=2),
            "P1DT2H3M4.5S": timedelta(days=1, hours=2, minutes=3, seconds=4.5),
            "pt1h": timedelta(hours=1),
            "-PT6H3M": -timedelta(hours=6, minutes=3),
            "PT-6H+3M": timedelta(hours=-6, minutes=3),
            "PT-0.5S": timedelta(seconds=-0.5),
            "PT0,25S": timedelta(seconds=0.25),
            "PT0.000000999S": timedelta(0),
        }
        for text, expected in cases.items():
            with self.subTest(text=text):
                self.assertEqual(coercion.parse_duration(text), expected)

    def test_rejects(self) -> None:
        for text in ["", "P", "PT", "P1DT", "P1Y", "P1W", "PT1.5M", " PT1S", "PT1.0000000001S"]:
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    coercion.parse_duration(text)


class TestOffsetDateTimeGrammar(unittest.TestCase):
    def test_accepts_offsets(self) -> None:
        value = coercion.parse_offset_date_time("2000-01-01T00:00:00Z")
        self.assertEqual(value.utcoffset(), timedelta(0))
        value = coercion.parse_offset_date_time("2000-01-01T10:15-05:00")
        self.assertEqual(value.utcoffset(), timedelta(hours=-5))
        self.assertEqual(value.hour, 10)

    def test_accepts_lowercase_designators(self) -> None:
        value = coercion.parse_offset_date_time("2000-01-01t23:59:59z")
        self.assertEqual(value, datetime(2000, 1, 1, 23, 59, 59, tzinfo=timezone.utc))

    def test_rejects(self) -> None:
        for text in [
            "2000-01-01",
            "2000-01-01T00:00:00",
            "2000-13-01T00:00:00Z",
            " not a OffsetDateTime",
            "2000-01-01 00:00:00Z",
            "2000-01-01T24:00Z",
            "2000-01-01T24:00:00+01:00",
        ]:
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    coercion.parse_offset_date_time(text)


class TestInetAddressLiterals(unittest.TestCase):
    def test_brackets_enclose_only_ipv6(self) -> None:
        self.assertEqual(coercion.resolve_inet_address("[::1]"), ipaddress.ip_address("::1"))
        for text in ["[127.0.0.1]", "[]", "[not-an-address]"]:
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    coercion.resolve_inet_address(text)


class TestBooleanGrammar(unittest.TestCase):
    def test_rejects_near_misses(self) -> None:
        for text in ["yes", "1", " true", "t", ""]:
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    coercion.parse_boolean(text)


if __name__ == "__main__":
    unittest.main()
