"""Tests for config persistence and settings sanitization.

Malformed config data falls back to defaults and yields readable messages.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyplaybooks import config
from lazyplaybooks.keybindings import Keybindings


class ConfigFileTests(unittest.TestCase):
    def test_missing_file_loads_empty_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("lazyplaybooks.config.CONFIG_PATH", Path(tmp) / "config.json"):
                self.assertEqual(config.load_config(), {})

    def test_malformed_or_non_object_json_loads_empty_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazyplaybooks.config.CONFIG_PATH", config_path):
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_save_and_load_round_trip_creates_parent_dirs(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("lazyplaybooks.config.CONFIG_PATH", config_path):
                config.save_config({"sort_files": False})
                self.assertEqual(config.load_config(), {"sort_files": False})

    def test_save_theme_name_merges_into_existing_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("lazyplaybooks.config.CONFIG_PATH", config_path):
                config.save_config({"ignore_comments": False})
                config.save_theme_name(" ocean ")
                config.save_theme_name("   ")
                saved = config.load_config()

        self.assertEqual(saved, {"ignore_comments": False, "theme": "ocean"})


class LoadSettingsTests(unittest.TestCase):
    def test_defaults_without_messages(self) -> None:
        settings, messages = config.load_settings({})

        self.assertEqual(settings, config.PlaybookSettings())
        self.assertTrue(settings.ignore_comments)
        self.assertTrue(settings.sort_files)
        self.assertEqual(settings.style, "monokai")
        self.assertEqual(messages, [])

    def test_accepts_booleans_and_boolean_strings(self) -> None:
        settings, messages = config.load_settings({"ignore_comments": " false ", "sort_files": False})

        self.assertFalse(settings.ignore_comments)
        self.assertFalse(settings.sort_files)
        self.assertEqual(messages, [])

    def test_invalid_boolean_keeps_default_and_reports(self) -> None:
        settings, messages = config.load_settings({"sort_files": "yes"})

        self.assertTrue(settings.sort_files)
        self.assertEqual(
            messages,
            ["'sort_files' config value must be 'true' or 'false', but it's 'yes'. The default 'true' is used."],
        )

    def test_bad_keybinding_reverts_all_bindings(self) -> None:
        settings, messages = config.load_settings({"bind_edit": "Alt e", "bind_reload": "oops"})

        self.assertEqual(settings.keybindings, Keybindings())
        self.assertEqual(len(messages), 1)
        self.assertTrue(messages[0].startswith("Failed to parse keybindings, check your config:"))
        self.assertTrue(messages[0].endswith("Default is used."))

    def test_unreachable_bindings_fall_back_to_defaults(self) -> None:
        for data in ({"bind_reload": "Alt ."}, {"bind_switch_filter_id": "Ctrl i"}):
            with self.subTest(data=data):
                settings, messages = config.load_settings(data)

                self.assertEqual(settings.keybindings, Keybindings())
                self.assertEqual(len(messages), 1)
                self.assertTrue(messages[0].startswith("Failed to parse keybindings"))

    def test_reads_theme_style_and_bindings(self) -> None:
        settings, _ = config.load_settings({"theme": "ocean", "style": " ", "bind_edit": "Alt e"})

        self.assertEqual(settings.theme, "ocean")
        self.assertEqual(settings.style, "monokai")
        self.assertEqual(settings.keybindings.edit.token, "ALT_e")

    def test_reads_persisted_file_when_no_data_given(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text('{"ignore_comments": false}\n', encoding="utf-8")
            with mock.patch("lazyplaybooks.config.CONFIG_PATH", config_path):
                settings, _ = config.load_settings()

        self.assertFalse(settings.ignore_comments)


if __name__ == "__main__":
    unittest.main()
