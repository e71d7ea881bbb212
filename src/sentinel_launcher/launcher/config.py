"""Launcher configuration using pydantic-settings.

Settings come from ``SENTINEL_*`` environment variables only. The bot's own
``.env`` file is payload for the child process, not launcher configuration,
so it is deliberately not an ``env_file`` source here.

Usage:
    from sentinel_launcher.launcher.config import settings
    print(settings.binary)
"""

import logging
from pathlib import Path
from typing import Literal, Self

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

MissingEnvPolicy = Literal["fatal", "ignore"]


class LauncherSettings(BaseSettings):
    """Launcher settings loaded from environment variables.

    CLI options override individual fields through ``model_copy``.
    """

    model_config = SettingsConfigDict(
        env_file=None,
        extra="ignore",
    )

    @model_validator(mode="after")
    def warn_unusual_combinations(self) -> Self:
        """Warn when the build step is enabled without a command."""
        if self.build and not self.build_command.strip():
            logger.warning("SENTINEL_BUILD is set but SENTINEL_BUILD_COMMAND is empty")
        return self

    # ==========================================================================
    # PATHS
    # ==========================================================================

    home: Path | None = Field(
        default=None,
        validation_alias="SENTINEL_HOME",
        description="Launcher home directory (None = auto-detect)",
    )

    env_file: Path = Field(
        default=Path(".env"),
        validation_alias="SENTINEL_ENV_FILE",
        description=".env file passed to the bot, relative to home",
    )

    binary: Path = Field(
        default=Path("target/release/frankfurt_sentinel"),
        validation_alias="SENTINEL_BINARY",
        description="Bot binary, relative to home",
    )

    # ==========================================================================
    # BUILD
    # ==========================================================================

    build_command: str = Field(
        default="cargo build --release",
        validation_alias="SENTINEL_BUILD_COMMAND",
        description="Command that produces the binary",
    )

    build: bool = Field(
        default=False,
        validation_alias="SENTINEL_BUILD",
        description="Run the build command before every launch",
    )

    # ==========================================================================
    # POLICIES
    # ==========================================================================

    missing_env: MissingEnvPolicy = Field(
        default="fatal",
        validation_alias="SENTINEL_MISSING_ENV",
        description="What to do when the .env file is missing",
    )

    override_env: bool = Field(
        default=True,
        validation_alias="SENTINEL_OVERRIDE_ENV",
        description=".env values replace variables already in the environment",
    )

    replace_process: bool = Field(
        default=False,
        validation_alias="SENTINEL_EXEC",
        description="exec the binary instead of running it as a child",
    )


# Singleton instance
settings = LauncherSettings()
