"""Launcher for the Frankfurt Sentinel bot binary.

Resolves the launcher home, exports the bot's .env file into the process
environment, optionally rebuilds the binary, checks that it exists, and runs
it with the launcher's own exit code mirroring the bot's.

Structure:
- sentinel_launcher/lib/: Pipeline steps (parametric, no settings access)
  - paths.py: Home resolution and working directory
  - envfile.py: .env loading and export
  - guards.py: Build step and binary existence checks
  - process.py: Spawn or exec the binary
  - errors.py: LauncherError taxonomy

- sentinel_launcher/launcher/: Orchestration
  - config.py: Settings via pydantic-settings
  - models.py: LaunchPlan and BotEnvironment
  - core.py: The launch pipeline and configuration check

- sentinel_launcher/cli/: The ``sentinel-launch`` command
"""

from sentinel_launcher.version import LAUNCHER_VERSION

__version__ = LAUNCHER_VERSION
