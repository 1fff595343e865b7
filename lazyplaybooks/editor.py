"""Open playbook files in the user's editor.

The editor runs while the picker has left raw/alternate-screen mode. Failures
come back as message strings so the picker can show them in its error row.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Callable, ContextManager, Mapping

logger = logging.getLogger(__name__)

EDITOR_ENV_VARS = ("VISUAL", "EDITOR")


def editor_command(environ: Mapping[str, str] | None = None) -> list[str] | None:
    """Return the editor argv from ``$VISUAL`` or ``$EDITOR``, if any is set."""
    environ = os.environ if environ is None else environ
    for name in EDITOR_ENV_VARS:
        value = environ.get(name, "").strip()
        if value:
            return shlex.split(value)
    return None


def launch_editor(target: Path, suspend: Callable[[], ContextManager[None]]) -> str | None:
    cmd = editor_command()
    if not cmd:
        return "Cannot edit: neither $VISUAL nor $EDITOR is set."

    logger.info("opening %s with %s", target, cmd[0])
    with suspend():
        try:
            result = subprocess.run([*cmd, str(target)], check=False)
        except OSError as exc:
            logger.error("editor launch failed: %s", exc)
            return f"Failed to launch editor '{cmd[0]}': {exc}"
    if result.returncode != 0:
        logger.warning("editor exited with status %d", result.returncode)
        return f"Editor exited with status {result.returncode}."
    return None
