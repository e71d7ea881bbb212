"""Load a .env file and export it into the process environment.

Parsing is delegated to python-dotenv with interpolation disabled, which
matches the old ``export $(grep -v '^#' .env | xargs)`` pipeline: blank lines
and ``#`` comments are skipped, each pair is split on the first ``=``,
surrounding quotes are dropped and the last occurrence of a key wins.

Examples:
    Load and export, failing if the file is missing::

        >>> values = load_env_file(Path(".env"), required=True)
        >>> apply_env(values)
        ['MC_SERVER', 'MC_PORT', 'BOT_NAME']

    Tolerate a missing file::

        >>> load_env_file(Path("missing.env"), required=False)
        {}
"""

import logging
import os
from collections.abc import Mapping, MutableMapping
from pathlib import Path

from dotenv import dotenv_values

from sentinel_launcher.lib.errors import EnvFileInvalidError, EnvFileNotFoundError

logger = logging.getLogger(__name__)


def parse_env_file(path: Path) -> dict[str, str]:
    """Parse ``path`` into an ordered mapping of variable name to value.

    Lines without ``=`` carry no value and are skipped.
    """
    parsed = dotenv_values(path, interpolate=False, encoding="utf-8")

    values: dict[str, str] = {}
    for key, value in parsed.items():
        if value is None:
            logger.debug("Skipping %s in %s: no '=' on the line", key, path)
            continue
        values[key] = value
    return values


def load_env_file(path: Path, *, required: bool = True) -> dict[str, str]:
    """Read the .env file at ``path``.

    Args:
        path: Location of the .env file.
        required: Raise when the file is missing instead of returning an
            empty mapping.

    Returns:
        Mapping of variable name to value, in file order.

    Raises:
        EnvFileNotFoundError: If ``required`` and the file does not exist.
        EnvFileInvalidError: If the file cannot be read as UTF-8 text.
    """
    if not path.is_file():
        if required:
            raise EnvFileNotFoundError(
                f"Env file not found: {path}",
                hint="Create it from the example keys or pass --optional-env.",
            )
        logger.warning("Env file %s not found, using the current environment", path)
        return {}

    logger.info("Loading configuration from %s", path)
    try:
        return parse_env_file(path)
    except UnicodeDecodeError as e:
        raise EnvFileInvalidError(
            f"Env file is not valid UTF-8: {path}",
            hint="Save it as UTF-8.",
        ) from e
    except OSError as e:
        raise EnvFileInvalidError(
            f"Cannot read env file {path}: {e.strerror or e}",
            hint="Check its permissions.",
        ) from e


def apply_env(
    values: Mapping[str, str],
    *,
    override: bool = True,
    environ: MutableMapping[str, str] | None = None,
) -> list[str]:
    """Export ``values`` into ``environ`` (``os.environ`` by default).

    Args:
        values: Variables to export.
        override: Replace variables that are already set.
        environ: Target mapping.

    Returns:
        Names of the variables that were set.
    """
    target = os.environ if environ is None else environ

    applied: list[str] = []
    for key, value in values.items():
        if not override and key in target:
            logger.debug("Keeping existing %s", key)
            continue
        target[key] = value
        applied.append(key)

    logger.info("Exported %d variable(s)", len(applied))
    return applied
