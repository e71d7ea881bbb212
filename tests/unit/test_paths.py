"""Tests for launcher home resolution."""

import os
from pathlib import Path

import pytest

from sentinel_launcher.lib.errors import LauncherError
from sentinel_launcher.lib.paths import (
    enter_home,
    find_project_root,
    resolve_home,
    resolve_under,
)


class TestFindProjectRoot:
    """Tests for find_project_root."""

    def test_finds_env_marker(self, tmp_path: Path) -> None:
        """Walks up to the directory holding .env."""
        (tmp_path / ".env").write_text("A=1\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_project_root(nested) == tmp_path.resolve()

    def test_starts_from_file_parent(self, tmp_path: Path) -> None:
        """A file start point is replaced by its directory."""
        (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
        script = tmp_path / "start.py"
        script.write_text("", encoding="utf-8")

        assert find_project_root(script) == tmp_path.resolve()


class TestResolveHome:
    """Tests for resolve_home."""

    def test_explicit_wins(self, tmp_path: Path) -> None:
        """An explicit path is used as is."""
        assert resolve_home(tmp_path) == tmp_path.resolve()

    def test_explicit_string(self, tmp_path: Path) -> None:
        """String paths are accepted."""
        assert resolve_home(str(tmp_path)) == tmp_path.resolve()

    def test_walk_stops_at_nearest_marker(self, tmp_path: Path) -> None:
        """The nearest marked directory wins over a marked parent."""
        (tmp_path / ".env").write_text("OUTER=1\n", encoding="utf-8")
        project = tmp_path / "project"
        (project / "src" / "pkg").mkdir(parents=True)
        (project / ".env").write_text("INNER=1\n", encoding="utf-8")

        root = find_project_root(project / "src" / "pkg")

        assert root == project.resolve()
        assert root != tmp_path.resolve()


class TestEnterHome:
    """Tests for enter_home."""

    def test_changes_directory(self, tmp_path: Path) -> None:
        """The working directory becomes home."""
        enter_home(tmp_path)

        assert Path(os.getcwd()).resolve() == tmp_path.resolve()

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        """A non-directory home is a launcher error."""
        with pytest.raises(LauncherError) as exc_info:
            enter_home(tmp_path / "nope")

        assert exc_info.value.exit_code == 1


class TestResolveUnder:
    """Tests for resolve_under."""

    def test_relative_joined(self, tmp_path: Path) -> None:
        assert resolve_under(tmp_path, ".env") == tmp_path / ".env"

    def test_absolute_kept(self, tmp_path: Path) -> None:
        target = tmp_path / "bin" / "bot"
        assert resolve_under(Path("/elsewhere"), target) == target
