"""Models for launch planning and bot configuration checks.

The launcher passes every .env value to the bot untouched. ``BotEnvironment``
mirrors the keys the bot reads, with the bot's own defaults, so that
``sentinel-launch check`` can report what the bot will see before it starts.
"""

import logging
from pathlib import Path
from typing import Literal, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sentinel_launcher.launcher.config import MissingEnvPolicy

logger = logging.getLogger(__name__)

ValueSource = Literal[".env", "environment", "default"]

# Keys whose values must never be printed or logged.
SECRET_KEYS = frozenset({"GEMINI_API_KEY", "MS_EMAIL"})


class BotEnvironment(BaseModel):
    """Configuration keys read by the bot binary."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="after")
    def warn_missing_optional_keys(self) -> Self:
        """Warn if the generative-AI key is missing."""
        if not self.gemini_api_key:
            logger.warning("Missing API key (AI features will fail): GEMINI_API_KEY")
        return self

    server_address: str = Field(
        default="duiker.aternos.host",
        validation_alias="MC_SERVER",
        description="Game server host",
    )

    server_port: int = Field(
        default=35809,
        ge=1,
        le=65535,
        validation_alias="MC_PORT",
        description="Game server port",
    )

    bot_email: str = Field(
        default="",
        validation_alias="MS_EMAIL",
        description="Microsoft account email (empty = offline mode)",
    )

    bot_name: str = Field(
        default="PedroRTX",
        validation_alias="BOT_NAME",
        description="In-game display name",
    )

    gemini_api_key: str | None = Field(
        default=None,
        validation_alias="GEMINI_API_KEY",
        description="Generative-AI API key",
    )

    model_flash: str = Field(
        default="gemini-2.0-flash",
        validation_alias="MODEL_FLASH",
        description="Fast model identifier",
    )

    model_pro: str = Field(
        default="gemini-2.5-pro",
        validation_alias="MODEL_PRO",
        description="Reasoning model identifier",
    )

    @property
    def address(self) -> str:
        return f"{self.server_address}:{self.server_port}"

    @property
    def auth_mode(self) -> Literal["microsoft", "offline"]:
        return "microsoft" if self.bot_email else "offline"


def bot_env_keys() -> list[str]:
    """Return the environment variable names read by the bot, in field order."""
    return [
        str(field.validation_alias)
        for field in BotEnvironment.model_fields.values()
        if field.validation_alias
    ]


def mask_secret(value: str) -> str:
    """Mask a secret, keeping at most the last four characters."""
    if len(value) <= 8:
        return "*" * len(value)
    return "*" * (len(value) - 4) + value[-4:]


class LaunchPlan(BaseModel):
    """Fully resolved description of a single launch."""

    model_config = ConfigDict(frozen=True)

    home: Path
    env_file: Path
    binary: Path
    build_command: str
    build: bool = False
    missing_env: MissingEnvPolicy = "fatal"
    override_env: bool = True
    replace_process: bool = False
    args: tuple[str, ...] = ()

    @property
    def env_required(self) -> bool:
        return self.missing_env == "fatal"


class KeyReport(BaseModel):
    """One row of the ``check`` report."""

    key: str
    value: str
    source: ValueSource


class CheckReport(BaseModel):
    """Result of validating the bot configuration and binary."""

    env_file: Path
    env_file_found: bool
    binary: Path
    binary_ok: bool
    binary_problem: str | None = None
    keys: list[KeyReport] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    bot: BotEnvironment | None = None

    @property
    def ok(self) -> bool:
        return self.binary_ok and not self.errors
