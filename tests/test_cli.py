"""CLI argument handling and non-interactive playbook printing."""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyplaybooks import cli
from lazyplaybooks.app import print_playbook
from lazyplaybooks.config import PlaybookSettings
from lazyplaybooks.filters import FilterMode

PLAYBOOK = "# header\nmake build\nmake test\n\nmake deploy\nmake clean\nmake lint\nmake fmt\nmake docs\nmake bench\nmake check\nmake release\nmake tag\nmake push\n"


class PrintPlaybookTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "make.sh"
        self.path.write_text(PLAYBOOK, encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_prints_numbered_lines(self) -> None:
        out = io.StringIO()

        count = print_playbook(self.path, PlaybookSettings(), out=out)

        self.assertEqual(count, 12)
        self.assertTrue(out.getvalue().startswith("1. make build\n2. make test\n3. make deploy\n"))

    def test_name_filter(self) -> None:
        out = io.StringIO()

        print_playbook(self.path, PlaybookSettings(), filter_text="de", out=out)

        self.assertEqual(out.getvalue(), "3. make deploy\n")

    def test_id_filter_is_prefix_match(self) -> None:
        out = io.StringIO()

        print_playbook(self.path, PlaybookSettings(), filter_text="1", filter_mode=FilterMode.ID, out=out)

        self.assertEqual(
            out.getvalue(),
            "1. make build\n10. make release\n11. make tag\n12. make push\n",
        )

    def test_comments_kept_when_not_ignored(self) -> None:
        out = io.StringIO()

        print_playbook(self.path, PlaybookSettings(ignore_comments=False), out=out)

        self.assertTrue(out.getvalue().startswith("1. # header\n"))


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        self.config_patch = mock.patch("lazyplaybooks.config.CONFIG_PATH", self.root / "cfg" / "config.json")
        self.config_patch.start()

    def tearDown(self) -> None:
        self.config_patch.stop()
        self._tmp.cleanup()

    def run_cli(self, *argv: str, default_path: Path | None = None, interactive: bool = True):
        stdout = io.StringIO()
        with (
            mock.patch.object(sys, "argv", ["lazyplaybooks", *argv]),
            mock.patch("lazyplaybooks.cli.run_picker", return_value=["echo picked"]) as run_picker,
            mock.patch("lazyplaybooks.cli.stdin_is_interactive", return_value=interactive),
            mock.patch("sys.stdout", stdout),
        ):
            cli.main(default_path=default_path)
        return run_picker, stdout.getvalue()

    def test_defaults_to_current_working_directory(self) -> None:
        previous_cwd = Path.cwd()
        try:
            os.chdir(self.root)
            run_picker, output = self.run_cli()
        finally:
            os.chdir(previous_cwd)

        run_picker.assert_called_once()
        directory, settings, options = run_picker.call_args.args
        self.assertEqual(directory, self.root)
        self.assertEqual(settings, PlaybookSettings())
        self.assertFalse(options.no_color)
        self.assertEqual(output, "echo picked\n")

    def test_flags_override_settings(self) -> None:
        run_picker, _ = self.run_cli(
            str(self.root), "--no-sort", "--keep-comments", "--style", "native", "--no-color"
        )

        _directory, settings, options = run_picker.call_args.args
        self.assertFalse(settings.sort_files)
        self.assertFalse(settings.ignore_comments)
        self.assertEqual(settings.style, "native")
        self.assertTrue(options.no_color)

    def test_theme_flag_is_remembered(self) -> None:
        self.run_cli(str(self.root), "--theme", "ocean")

        saved = (self.root / "cfg" / "config.json").read_text(encoding="utf-8")
        self.assertIn('"theme": "ocean"', saved)

    def test_config_messages_are_forwarded(self) -> None:
        config_path = self.root / "cfg" / "config.json"
        config_path.parent.mkdir(parents=True)
        config_path.write_text('{"sort_files": "maybe"}', encoding="utf-8")

        run_picker, _ = self.run_cli(str(self.root))

        messages = run_picker.call_args.kwargs["messages"]
        self.assertEqual(len(messages), 1)
        self.assertIn("'sort_files'", messages[0])

    def test_missing_directory_exits(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli(str(self.root / "missing"))

        self.assertIn("Path not found", str(ctx.exception))

    def test_non_interactive_stdin_exits_with_hint(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli(str(self.root), interactive=False)

        self.assertIn("--print", str(ctx.exception))

    def test_print_mode_skips_picker(self) -> None:
        target = self.root / "ops.sh"
        target.write_text("ls\npwd\n", encoding="utf-8")

        run_picker, output = self.run_cli("--print", str(target), "--filter", "2", "--by", "id")

        run_picker.assert_not_called()
        self.assertEqual(output, "2. pwd\n")

    def test_print_mode_rejects_positional_path(self) -> None:
        target = self.root / "ops.sh"
        target.write_text("ls\n", encoding="utf-8")

        with self.assertRaises(SystemExit):
            self.run_cli(str(self.root), "--print", str(target))

    def test_invalid_filter_mode_is_rejected(self) -> None:
        with self.assertRaises(SystemExit), mock.patch("sys.stderr", io.StringIO()):
            self.run_cli("--print", "x", "--by", "regex")

    def test_log_file_receives_package_logs(self) -> None:
        log_path = self.root / "picker.log"
        try:
            self.run_cli(str(self.root), "--log-file", str(log_path), "--log-level", "debug")
            cli.logger.getChild("test").debug("hello from test")
        finally:
            cli.configure_logging(None, "INFO")

        self.assertIn("hello from test", log_path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
