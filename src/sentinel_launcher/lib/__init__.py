"""Reusable launcher building blocks.

Each module covers one step of the launch pipeline and is configured
through function arguments. Orchestration lives in
sentinel_launcher.launcher.

Modules:
- envfile: .env parsing and export into the process environment
- errors: LauncherError and its subclasses
- guards: Build step and binary existence checks
- paths: Launcher home resolution
- process: Spawn or exec the bot binary
"""

from sentinel_launcher.lib.envfile import apply_env, load_env_file, parse_env_file
from sentinel_launcher.lib.errors import (
    BinaryNotExecutableError,
    BinaryNotFoundError,
    BuildFailedError,
    EnvFileInvalidError,
    EnvFileNotFoundError,
    LauncherError,
)
from sentinel_launcher.lib.guards import build_hint, ensure_binary, run_build
from sentinel_launcher.lib.paths import (
    enter_home,
    find_project_root,
    resolve_home,
    resolve_under,
)
from sentinel_launcher.lib.process import replace, spawn

__all__ = [
    # Env file
    "apply_env",
    "load_env_file",
    "parse_env_file",
    # Errors
    "BinaryNotExecutableError",
    "BinaryNotFoundError",
    "BuildFailedError",
    "EnvFileInvalidError",
    "EnvFileNotFoundError",
    "LauncherError",
    # Guards
    "build_hint",
    "ensure_binary",
    "run_build",
    # Paths
    "enter_home",
    "find_project_root",
    "resolve_home",
    "resolve_under",
    # Process
    "replace",
    "spawn",
]
