"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

REPO_ROOT: Path = Path(__file__).resolve().parents[1]


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def basic_workspace(fixtures_root: Path) -> Path:
    """Return the primary fixture workspace path."""
    return fixtures_root / "workspaces" / "basic"


@pytest.fixture(scope="session")
def bundled_root() -> Path:
    """Return the repository root holding the bundled skills/ directory."""
    return REPO_ROOT


@pytest.fixture()
def write_skill(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes ``skills/<folder>/SKILL.md`` under tmp_path."""

    def _write(folder: str, content: str) -> Path:
        skill_dir = tmp_path / "skills" / folder
        skill_dir.mkdir(parents=True, exist_ok=True)
        path = skill_dir / "SKILL.md"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
