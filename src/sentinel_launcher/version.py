"""Launcher version.

Bump the patch for fixes, the minor for new options or subcommands, and the
major when the pipeline steps or exit codes change.
"""

LAUNCHER_VERSION = "0.1.0"
