"""Launcher home resolution.

The launcher runs from a fixed home directory so that the relative paths it
uses (``.env``, ``target/release/frankfurt_sentinel``) resolve the same way
regardless of where it was invoked from.

Home resolution order:
    1. An explicit path (``--home`` or ``SENTINEL_HOME``).
    2. The first directory walking up from this package that holds a
       ``.env`` or ``pyproject.toml``.
    3. The current working directory.

The upward walk suits in-project and editable installs. For a global install
(pipx, user site) it starts inside site-packages and can stop at ``~`` when the
user keeps a ``~/.env``, so set ``SENTINEL_HOME`` or pass ``--home`` there.

Examples:
    Resolve and enter the home directory::

        >>> home = resolve_home(None)
        >>> enter_home(home)
        PosixPath('/srv/frankfurt_sentinel')
"""

import logging
import os
from pathlib import Path

from sentinel_launcher.lib.errors import LauncherError

logger = logging.getLogger(__name__)

HOME_MARKERS = (".env", "pyproject.toml")


def find_project_root(start: Path | None = None) -> Path | None:
    """Walk up from ``start`` to the first directory holding a home marker."""
    current = (start or Path(__file__)).resolve()
    if current.is_file():
        current = current.parent
    for parent in [current, *current.parents]:
        if any((parent / marker).exists() for marker in HOME_MARKERS):
            return parent
    return None


def resolve_home(explicit: Path | str | None) -> Path:
    """Return the absolute launcher home directory."""
    if explicit is not None:
        return Path(explicit).expanduser().resolve()

    root = find_project_root()
    if root is not None:
        return root

    logger.debug("No project root found, using current directory")
    return Path.cwd().resolve()


def enter_home(home: Path) -> Path:
    """Make ``home`` the process working directory.

    Raises:
        LauncherError: If ``home`` is not an existing directory.
    """
    if not home.is_dir():
        raise LauncherError(
            f"Launcher home is not a directory: {home}",
            hint="Set SENTINEL_HOME or pass --home.",
        )
    os.chdir(home)
    logger.debug("Working directory: %s", home)
    return home


def resolve_under(home: Path, path: Path | str) -> Path:
    """Resolve ``path`` relative to ``home`` unless it is already absolute."""
    candidate = Path(path).expanduser()
    if not candidate.is_absolute():
        candidate = home / candidate
    return candidate
