"""Launch pipeline orchestration.

The pipeline is strictly sequential:

1. Enter the launcher home.
2. Load the .env file and export it into ``os.environ``.
3. Optionally run the build command.
4. Check that the binary is executable.
5. Spawn (or exec) the binary and return its exit code.

Any ``LauncherError`` stops the pipeline before the binary is launched.
"""

import logging
import os
from collections.abc import Mapping

from pydantic import ValidationError

from sentinel_launcher.launcher.config import LauncherSettings
from sentinel_launcher.launcher.models import (
    SECRET_KEYS,
    BotEnvironment,
    CheckReport,
    KeyReport,
    LaunchPlan,
    ValueSource,
    bot_env_keys,
    mask_secret,
)
from sentinel_launcher.lib.envfile import apply_env, load_env_file
from sentinel_launcher.lib.errors import LauncherError
from sentinel_launcher.lib.guards import build_hint, ensure_binary, run_build
from sentinel_launcher.lib.paths import enter_home, resolve_home, resolve_under
from sentinel_launcher.lib.process import replace, spawn

logger = logging.getLogger(__name__)


def build_plan(settings: LauncherSettings, args: tuple[str, ...] = ()) -> LaunchPlan:
    """Resolve ``settings`` into absolute paths."""
    home = resolve_home(settings.home)
    return LaunchPlan(
        home=home,
        env_file=resolve_under(home, settings.env_file),
        binary=resolve_under(home, settings.binary),
        build_command=settings.build_command,
        build=settings.build,
        missing_env=settings.missing_env,
        override_env=settings.override_env,
        replace_process=settings.replace_process,
        args=args,
    )


def run_launcher(plan: LaunchPlan) -> int:
    """Run the launch pipeline.

    Args:
        plan: Resolved launch plan.

    Returns:
        The exit code of the bot process. In exec mode this never returns.

    Raises:
        LauncherError: If any step before the launch fails.
    """
    enter_home(plan.home)

    values = load_env_file(plan.env_file, required=plan.env_required)
    apply_env(values, override=plan.override_env)

    if plan.build:
        run_build(plan.build_command)

    binary = ensure_binary(plan.binary, hint=build_hint(plan.build_command))

    logger.info("Launching %s", binary)
    if plan.replace_process:
        replace(binary, plan.args)
    return spawn(binary, plan.args)


def _merge(
    values: Mapping[str, str], environ: Mapping[str, str], *, override: bool
) -> dict[str, str]:
    if override:
        return {**environ, **values}
    return {**values, **environ}


def _key_report(
    key: str,
    values: Mapping[str, str],
    environ: Mapping[str, str],
    *,
    override: bool,
) -> KeyReport:
    source: ValueSource
    if key in values and (override or key not in environ):
        source, value = ".env", values[key]
    elif key in environ:
        source, value = "environment", environ[key]
    else:
        field = next(
            f for f in BotEnvironment.model_fields.values() if f.validation_alias == key
        )
        default = field.default
        return KeyReport(
            key=key,
            value="(unset)" if default is None else str(default),
            source="default",
        )

    if key in SECRET_KEYS and value:
        value = mask_secret(value)
    return KeyReport(key=key, value=value, source=source)


def check_configuration(
    plan: LaunchPlan, environ: Mapping[str, str] | None = None
) -> CheckReport:
    """Validate what the bot would see, without touching ``os.environ``."""
    environ = dict(os.environ if environ is None else environ)
    errors: list[str] = []

    env_file_found = plan.env_file.is_file()
    try:
        values = load_env_file(plan.env_file, required=plan.env_required)
    except LauncherError as e:
        errors.append(e.message)
        values = {}

    merged = _merge(values, environ, override=plan.override_env)
    bot: BotEnvironment | None = None
    try:
        bot = BotEnvironment.model_validate(merged)
    except ValidationError as e:
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            errors.append(f"{location}: {error['msg']}")

    binary_problem: str | None = None
    try:
        ensure_binary(plan.binary, hint=build_hint(plan.build_command))
    except LauncherError as e:
        binary_problem = e.message

    return CheckReport(
        env_file=plan.env_file,
        env_file_found=env_file_found,
        binary=plan.binary,
        binary_ok=binary_problem is None,
        binary_problem=binary_problem,
        keys=[
            _key_report(key, values, environ, override=plan.override_env)
            for key in bot_env_keys()
        ],
        errors=errors,
        bot=bot,
    )
