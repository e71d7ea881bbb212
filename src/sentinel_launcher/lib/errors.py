"""Launcher error taxonomy.

Every failure that stops the launch pipeline is a ``LauncherError``. Library
code raises them; the CLI is the only place that turns them into a
diagnostic and an exit code.

Example:
    from sentinel_launcher.lib.errors import BinaryNotFoundError

    raise BinaryNotFoundError(
        f"Binary not found at {path}",
        hint="Run 'cargo build --release' first.",
    )
"""


class LauncherError(Exception):
    """Base class for errors that abort the launch.

    Args:
        message: Human-readable diagnostic line.
        hint: Optional remediation shown after the message.
    """

    exit_code: int = 1

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class EnvFileNotFoundError(LauncherError):
    """The .env file is missing and the policy makes that fatal."""


class EnvFileInvalidError(LauncherError):
    """The .env file exists but cannot be read or decoded."""


class BuildFailedError(LauncherError):
    """The build step exited non-zero or could not be started."""


class BinaryNotFoundError(LauncherError):
    """The target binary does not exist."""


class BinaryNotExecutableError(LauncherError):
    """The target binary exists but cannot be executed."""
