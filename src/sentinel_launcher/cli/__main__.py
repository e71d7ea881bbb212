"""Command line for launching the Frankfurt Sentinel bot.

Running with no subcommand loads the .env file, checks the binary and starts
the bot. The launcher exits with the bot's exit code, or 1 if it failed before
the launch.

Usage:
    uv run sentinel-launch
    uv run sentinel-launch --build
    uv run sentinel-launch --optional-env --binary ./bin/frankfurt_sentinel
    uv run sentinel-launch check
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from click.core import ParameterSource
from rich.console import Console
from rich.table import Table

from sentinel_launcher.launcher.config import settings
from sentinel_launcher.launcher.core import (
    build_plan,
    check_configuration,
    run_launcher,
)
from sentinel_launcher.launcher.models import CheckReport, LaunchPlan
from sentinel_launcher.lib.errors import LauncherError
from sentinel_launcher.version import LAUNCHER_VERSION

logger = logging.getLogger(__name__)

console = Console(highlight=False, markup=False)

app = typer.Typer(
    name="sentinel-launch",
    help="Launch the Frankfurt Sentinel bot",
    add_completion=False,
    pretty_exceptions_show_locals=False,
)


def _fail(error: LauncherError) -> typer.Exit:
    """Print a launcher error to stderr and build the matching exit."""
    typer.echo(f"Error: {error.message}", err=True)
    if error.hint:
        typer.echo(f"Hint: {error.hint}", err=True)
    return typer.Exit(error.exit_code)


def _given(ctx: typer.Context, name: str) -> bool:
    """Whether an option was set on the command line rather than defaulted."""
    return ctx.get_parameter_source(name) is not ParameterSource.DEFAULT


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    home: Annotated[
        Path | None,
        typer.Option("--home", help="Launcher home (default: auto-detect)"),
    ] = None,
    env_file: Annotated[
        Path | None,
        typer.Option("--env-file", "-e", help=".env file, relative to home"),
    ] = None,
    binary: Annotated[
        Path | None,
        typer.Option("--binary", "-b", help="Bot binary, relative to home"),
    ] = None,
    build: Annotated[
        bool,
        typer.Option("--build/--no-build", help="Run the build command first"),
    ] = False,
    require_env: Annotated[
        bool,
        typer.Option(
            "--require-env/--optional-env",
            help="Fail when the .env file is missing",
        ),
    ] = True,
    override: Annotated[
        bool,
        typer.Option(
            "--override/--no-override",
            help=".env values replace existing environment variables",
        ),
    ] = True,
    replace_process: Annotated[
        bool,
        typer.Option("--exec", help="Replace the launcher process with the bot"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option("--version", help="Show the launcher version and exit"),
    ] = False,
) -> None:
    """Launch the Frankfurt Sentinel bot."""
    if version:
        typer.echo(LAUNCHER_VERSION)
        raise typer.Exit()

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    overrides: dict[str, object] = {}
    if home is not None:
        overrides["home"] = home
    if env_file is not None:
        overrides["env_file"] = env_file
    if binary is not None:
        overrides["binary"] = binary
    if _given(ctx, "build"):
        overrides["build"] = build
    if _given(ctx, "require_env"):
        overrides["missing_env"] = "fatal" if require_env else "ignore"
    if _given(ctx, "override"):
        overrides["override_env"] = override
    if replace_process:
        overrides["replace_process"] = True

    plan = build_plan(settings.model_copy(update=overrides))
    ctx.obj = plan

    if ctx.invoked_subcommand is not None:
        return

    try:
        exit_code = run_launcher(plan)
    except LauncherError as e:
        raise _fail(e) from e

    raise typer.Exit(exit_code)


def _print_report(report: CheckReport) -> None:
    table = Table(title="Bot configuration")
    table.add_column("Key")
    table.add_column("Value")
    table.add_column("Source")
    for row in report.keys:
        table.add_row(row.key, row.value, row.source)
    console.print(table)

    env_status = "found" if report.env_file_found else "missing"
    console.print(f"Env file: {report.env_file} ({env_status})")
    if report.binary_ok:
        console.print(f"Binary: {report.binary} (ok)")
    else:
        console.print(f"Binary: {report.binary_problem}")
    if report.bot is not None:
        console.print(f"Target: {report.bot.address} ({report.bot.auth_mode} auth)")


@app.command()
def check(ctx: typer.Context) -> None:
    """Validate the bot configuration and binary without launching."""
    plan: LaunchPlan = ctx.obj
    report = check_configuration(plan)
    _print_report(report)

    for error in report.errors:
        typer.echo(f"Error: {error}", err=True)

    if not report.ok:
        raise typer.Exit(1)
    typer.echo("Ready to launch.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
