"""Preconditions checked before the binary is launched."""

import logging
import os
import shlex
from pathlib import Path

import sh

from sentinel_launcher.lib.errors import (
    BinaryNotExecutableError,
    BinaryNotFoundError,
    BuildFailedError,
)

logger = logging.getLogger(__name__)


def run_build(command: str) -> None:
    """Run the build command in the foreground, in the current directory.

    Raises:
        BuildFailedError: If the command is empty, cannot be found, or exits
            non-zero.
    """
    argv = shlex.split(command)
    if not argv:
        raise BuildFailedError("Build command is empty")

    logger.info("Building: %s", command)
    try:
        build = sh.Command(argv[0])
        build(*argv[1:], _fg=True)
    except sh.CommandNotFound as e:
        raise BuildFailedError(
            f"Build tool not found: {argv[0]}",
            hint="Install it or set SENTINEL_BUILD_COMMAND.",
        ) from e
    except sh.ErrorReturnCode as e:
        raise BuildFailedError(
            f"Build failed with exit code {e.exit_code}: {command}"
        ) from e


def ensure_binary(path: Path, *, hint: str | None = None) -> Path:
    """Check that ``path`` is an executable regular file.

    Raises:
        BinaryNotFoundError: If nothing exists at ``path``.
        BinaryNotExecutableError: If ``path`` is not an executable file.
    """
    if not path.exists():
        raise BinaryNotFoundError(f"Binary not found at {path}", hint=hint)
    if not path.is_file() or not os.access(path, os.X_OK):
        raise BinaryNotExecutableError(
            f"Binary at {path} is not an executable file",
            hint=f"Check its permissions (chmod +x {path}).",
        )
    return path


def build_hint(build_command: str) -> str:
    """Remediation shown when the binary is missing."""
    return f"Run '{build_command}' first."
