"""Tests for properties text loading."""

import io
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from TypedProps.properties import from_file, load_env_file, load_properties, parse_properties


class TestGrammar(unittest.TestCase):
    def test_separators(self) -> None:
        text = "a=1\nb:2\nc 3\nd\t=\t4\ne   :  5\n"
        self.assertEqual(parse_properties(text), {"a": "1", "b": "2", "c": "3", "d": "4", "e": "5"})

    def test_comments_and_blank_lines(self) -> None:
        text = "# comment\n! also comment\n\n   \n  # indented comment\nkey=value\n"
        self.assertEqual(parse_properties(text), {"key": "value"})

    def test_key_without_value(self) -> None:
        self.assertEqual(parse_properties("flag\nother=\n"), {"flag": "", "other": ""})

    def test_only_first_separator_splits(self) -> None:
        self.assertEqual(parse_properties("url=http://host:80/a=b"), {"url": "http://host:80/a=b"})
        self.assertEqual(parse_properties("k = = v"), {"k": "= v"})

    def test_value_keeps_trailing_whitespace(self) -> None:
        self.assertEqual(parse_properties("k=v  \n"), {"k": "v  "})

    def test_line_endings(self) -> None:
        self.assertEqual(parse_properties("a=1\r\nb=2\rc=3"), {"a": "1", "b": "2", "c": "3"})

    def test_continuation(self) -> None:
        text = "fruits = apple, banana, \\\n         pear, \\\n         cherry\n"
        self.assertEqual(parse_properties(text), {"fruits": "apple, banana, pear, cherry"})

    def test_even_backslashes_do_not_continue(self) -> None:
        text = "path=C:\\\\\nnext=1\n"
        self.assertEqual(parse_properties(text), {"path": "C:\\", "next": "1"})

    def test_continuation_at_end_of_text(self) -> None:
        self.assertEqual(parse_properties("k=v\\"), {"k": "v"})

    def test_comment_does_not_continue(self) -> None:
        self.assertEqual(parse_properties("# note \\\nk=v\n"), {"k": "v"})

    def test_escaped_key_characters(self) -> None:
        text = "my\\ key\\:x\\=y = value\n"
        self.assertEqual(parse_properties(text), {"my key:x=y": "value"})

    def test_escapes(self) -> None:
        text = "k=tab\\there\\nnew\\rret\\fform\\\\back\\qplain\n"
        self.assertEqual(parse_properties(text), {"k": "tab\there\nnew\rret\fform\\backqplain"})

    def test_unicode_escape(self) -> None:
        self.assertEqual(parse_properties("k=caf\\u00E9"), {"k": "café"})

    def test_surrogate_pair_escape(self) -> None:
        self.assertEqual(parse_properties("k=\\uD83D\\uDE00"), {"k": "\U0001F600"})

    def test_malformed_unicode_escape(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            parse_properties("k=\\u12G4")
        self.assertEqual(str(ctx.exception), "Malformed \\uxxxx encoding.")

    def test_duplicates_last_wins(self) -> None:
        self.assertEqual(parse_properties("k=1\nk=2\n"), {"k": "2"})


class TestStreams(unittest.TestCase):
    def test_latin1_stream(self) -> None:
        stream = io.BytesIO("name=Jos\u00e9\n".encode("iso-8859-1"))
        self.assertEqual(load_properties(stream), {"name": "José"})

    def test_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "app.properties"
            path.write_bytes(b"# app\nport=8080\nhost = example.com\n")
            self.assertEqual(from_file(path), {"port": "8080", "host": "example.com"})
            self.assertEqual(from_file(str(path)), {"port": "8080", "host": "example.com"})

    def test_from_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                from_file(Path(tmp) / "missing.properties")


class TestEnvFiles(unittest.TestCase):
    def test_load_env_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / ".env"
            path.write_text(
                "# settings\nHOST=localhost\nexport PORT=5432\nURL=\"postgres://${HOST}:${PORT}\"\nBARE\n",
                encoding="utf-8",
            )
            values = load_env_file(path)
        self.assertEqual(values["HOST"], "localhost")
        self.assertEqual(values["PORT"], "5432")
        self.assertEqual(values["URL"], "postgres://localhost:5432")
        self.assertNotIn("BARE", values)

    def test_missing_env_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FileNotFoundError):
                load_env_file(Path(tmp) / ".env")


if __name__ == "__main__":
    unittest.main()
