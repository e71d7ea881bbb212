"""Hand off to the bot binary.

Two modes:

- ``spawn`` runs the binary as a foreground child with inherited stdio and
  returns its exit code, so the launcher can exit with the same code.
- ``replace`` swaps the launcher process image for the binary via
  ``os.execve`` and never returns.

Example:
    >>> code = spawn(Path("target/release/frankfurt_sentinel"), env=dict(os.environ))
    >>> raise SystemExit(code)
"""

import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import NoReturn

import sh

from sentinel_launcher.lib.errors import BinaryNotExecutableError

logger = logging.getLogger(__name__)

# Shell convention for a child terminated by signal N.
SIGNAL_EXIT_BASE = 128


def spawn(
    binary: Path,
    args: Sequence[str] = (),
    *,
    env: Mapping[str, str] | None = None,
) -> int:
    """Run ``binary`` in the foreground and return its exit code.

    The child inherits the launcher's stdio and working directory.
    """
    try:
        command = sh.Command(str(binary))
    except sh.CommandNotFound as e:
        raise BinaryNotExecutableError(f"Cannot execute {binary}") from e

    try:
        command(
            *args,
            _env=dict(os.environ if env is None else env),
            _fg=True,
        )
    except sh.SignalException as e:
        code = SIGNAL_EXIT_BASE + abs(e.exit_code)
        logger.warning("%s terminated by signal %d", binary.name, abs(e.exit_code))
        return code
    except sh.ErrorReturnCode as e:
        logger.info("%s exited with code %d", binary.name, e.exit_code)
        return e.exit_code

    logger.info("%s exited with code 0", binary.name)
    return 0


def replace(
    binary: Path,
    args: Sequence[str] = (),
    *,
    env: Mapping[str, str] | None = None,
) -> NoReturn:
    """Replace the current process with ``binary``."""
    logger.info("Executing %s", binary.name)
    for handler in logging.getLogger().handlers:
        handler.flush()
    environ = dict(os.environ if env is None else env)
    os.execve(str(binary), [str(binary), *args], environ)
