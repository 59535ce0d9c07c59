"""Tests for layered config parsing and validation."""

import sys
import tempfile
import unittest
from copy import deepcopy
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from TypedProps.config import load_config, load_config_with_defaults, parse_config_dict


def _base_raw_config() -> dict:
    return {
        "log": {"level": "info", "to_file": False, "dir": "log"},
        "output": {"format": "console", "sort_keys": True},
    }


class TestConfigLayering(unittest.TestCase):
    def test_parse_success_nested_access(self) -> None:
        cfg = parse_config_dict(_base_raw_config())
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertFalse(cfg.runtime.to_file)
        self.assertEqual(cfg.output.format, "console")
        self.assertTrue(cfg.output.sort_keys)

    def test_output_format_is_normalized(self) -> None:
        raw = _base_raw_config()
        raw["output"]["format"] = " JSON "
        self.assertEqual(parse_config_dict(raw).output.format, "json")

    def test_output_unknown_format_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["output"]["format"] = "yaml"
        with self.assertRaisesRegex(ValueError, "output\\.format"):
            parse_config_dict(raw)

    def test_sort_keys_defaults_to_true(self) -> None:
        raw = _base_raw_config()
        del raw["output"]["sort_keys"]
        self.assertTrue(parse_config_dict(raw).output.sort_keys)

    def test_sort_keys_type_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["output"]["sort_keys"] = "yes"
        with self.assertRaisesRegex(TypeError, "output\\.sort_keys"):
            parse_config_dict(raw)

    def test_unknown_log_level(self) -> None:
        raw = _base_raw_config()
        raw["log"]["level"] = "verbose"
        with self.assertRaisesRegex(ValueError, "log\\.level"):
            parse_config_dict(raw)

    def test_log_level_is_trimmed_and_upper_cased(self) -> None:
        raw = _base_raw_config()
        raw["log"]["level"] = " warning "
        self.assertEqual(parse_config_dict(raw).runtime.level, "WARNING")

    def test_log_dir_required_when_logging_to_file(self) -> None:
        raw = _base_raw_config()
        raw["log"]["to_file"] = True
        raw["log"]["dir"] = "  "
        with self.assertRaisesRegex(ValueError, "log\\.dir"):
            parse_config_dict(raw)

    def test_missing_section(self) -> None:
        raw = deepcopy(_base_raw_config())
        del raw["output"]
        with self.assertRaisesRegex(ValueError, "output"):
            parse_config_dict(raw)

    def test_section_type_error(self) -> None:
        raw = deepcopy(_base_raw_config())
        raw["log"] = ["INFO"]
        with self.assertRaisesRegex(TypeError, "log must be an object"):
            parse_config_dict(raw)


class TestConfigOverride(unittest.TestCase):
    def test_defaults_only(self) -> None:
        cfg = load_config_with_defaults(None)
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.output.format, "console")

    def test_missing_override_file_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            cfg = load_config_with_defaults(Path(tmp) / "absent.yml")
        self.assertEqual(cfg.output.format, "console")

    def test_partial_override_is_deep_merged(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "override.yml"
            path.write_text("output:\n  format: json\nlog:\n  level: DEBUG\n", encoding="utf-8")
            cfg = load_config_with_defaults(path)
        self.assertEqual(cfg.output.format, "json")
        self.assertTrue(cfg.output.sort_keys)
        self.assertEqual(cfg.runtime.level, "DEBUG")
        self.assertEqual(cfg.runtime.dir, "log")

    def test_override_root_must_be_mapping(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "override.yml"
            path.write_text("- a\n- b\n", encoding="utf-8")
            with self.assertRaisesRegex(ValueError, "mapping"):
                load_config_with_defaults(path)

    def test_load_config_without_defaults_requires_all_sections(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "partial.yml"
            path.write_text("output:\n  format: json\n", encoding="utf-8")
            with self.assertRaisesRegex(ValueError, "log"):
                load_config(path)


if __name__ == "__main__":
    unittest.main()
