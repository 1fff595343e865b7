"""Command-line front door for lazyplaybooks.

Parses CLI options, resolves settings and the picker directory, and either
prints a playbook non-interactively or runs the interactive picker.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from .app import PickerOptions, print_playbook, run_picker, stdin_is_interactive
from .config import load_settings, save_theme_name
from .filters import FilterMode
from .ui_theme import available_theme_names

logger = logging.getLogger("lazyplaybooks")

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(log_file: str | None, level: str) -> None:
    """Send package logs to ``log_file``; stay silent when none is given.

    The terminal belongs to the picker UI, so logs never go to stderr.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def _filter_mode(value: str) -> FilterMode:
    """argparse type mapping ``name``/``id`` to a filter mode."""
    normalized = value.strip().lower()
    for mode in FilterMode:
        if mode.value.lower() == normalized:
            return mode
    raise argparse.ArgumentTypeError(f"invalid filter mode: {value!r} (choose name or id)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Pick a playbook file, filter its lines, and print the chosen command."
    )
    parser.add_argument("path", nargs="?", default=None, help="Playbook directory. Defaults to current directory.")
    parser.add_argument("--style", default=None, help="Pygments style name for playbook lines.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}); remembered for later runs.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--no-sort", action="store_true", help="Keep directory order instead of sorting files.")
    parser.add_argument("--keep-comments", action="store_true", help="Show '#' comment lines in playbooks.")
    parser.add_argument("--print", dest="print_path", metavar="FILE", help="Print FILE as numbered playbook lines and exit.")
    parser.add_argument("--filter", default="", help="Filter text applied with --print.")
    parser.add_argument(
        "--by",
        type=_filter_mode,
        default=FilterMode.NAME,
        help="Match --filter against line text (name) or line number prefix (id).",
    )
    parser.add_argument("--log-file", default=None, help="Write debug logs to this file.")
    parser.add_argument("--log-level", default="INFO", help="Log level for --log-file (default: INFO).")
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch the picker or print a playbook.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args()
    configure_logging(args.log_file, args.log_level)

    settings, messages = load_settings()
    overrides: dict[str, object] = {}
    if args.style is not None:
        overrides["style"] = args.style
    if args.theme is not None:
        overrides["theme"] = args.theme
        save_theme_name(args.theme)
    if args.no_sort:
        overrides["sort_files"] = False
    if args.keep_comments:
        overrides["ignore_comments"] = False
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    if args.print_path is not None:
        if args.path is not None:
            raise SystemExit("Cannot combine positional path with --print.")
        print_path = Path(args.print_path)
        if not print_path.is_file():
            raise SystemExit(f"Path not found: {print_path}")
        print_playbook(print_path, settings, filter_text=args.filter, filter_mode=args.by)
        return

    if default_path is None:
        default_path = Path.cwd()
    directory = Path(args.path or default_path)
    if not directory.is_dir():
        raise SystemExit(f"Path not found: {directory}")
    if not stdin_is_interactive():
        raise SystemExit("lazyplaybooks needs an interactive terminal; use --print FILE otherwise.")

    emitted = run_picker(
        directory.resolve(),
        settings,
        PickerOptions(no_color=args.no_color, theme=args.theme),
        messages=messages,
    )
    for line in emitted:
        sys.stdout.write(line + "\n")


if __name__ == "__main__":
    main()
