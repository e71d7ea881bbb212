"""Shared test fixtures.

Every test runs with a snapshot of ``os.environ`` and the working directory
that is restored afterwards, since the launcher mutates both.
"""

import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from sentinel_launcher.launcher.models import LaunchPlan, bot_env_keys

BinaryFactory = Callable[..., Path]


@pytest.fixture(autouse=True)
def isolated_process_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Restore os.environ and the working directory after each test."""
    saved = dict(os.environ)
    monkeypatch.chdir(Path.cwd())
    for key in list(os.environ):
        if key.startswith("SENTINEL_") or key in bot_env_keys():
            monkeypatch.delenv(key)
    yield
    os.environ.clear()
    os.environ.update(saved)


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """Launcher home containing a minimal .env file."""
    (tmp_path / ".env").write_text(
        "# Frankfurt Sentinel\nMC_SERVER=localhost\nSERVER_PORT=35809\n",
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def make_binary(home: Path) -> BinaryFactory:
    """Factory writing an executable shell script as the bot binary."""

    def _make(
        body: str = "exit 0",
        *,
        relative: str = "target/release/frankfurt_sentinel",
        executable: bool = True,
    ) -> Path:
        path = home / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
        path.chmod(0o755 if executable else 0o644)
        return path

    return _make


@pytest.fixture
def plan(home: Path) -> LaunchPlan:
    """Launch plan rooted at the ``home`` fixture with default policies."""
    return LaunchPlan(
        home=home,
        env_file=home / ".env",
        binary=home / "target" / "release" / "frankfurt_sentinel",
        build_command="cargo build --release",
    )
