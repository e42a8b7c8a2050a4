"""Tests for discovery and slug derivation."""

from pathlib import Path

import pytest

from skillshelf.catalog.discovery import derive_slug, discover_skill_files, find_slug_collisions
from skillshelf.constants.config import DEFAULT_SKILL_GLOBS
from skillshelf.utils import sanitize_slug


def _write(path: Path, content: str = "# Skill\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_discover_follows_skills_path_convention(tmp_path: Path) -> None:
    _write(tmp_path / "skills" / "b-skill" / "SKILL.md")
    _write(tmp_path / "skills" / "a-skill" / "SKILL.md")
    _write(tmp_path / "skills" / "a-skill" / "README.md")
    _write(tmp_path / "docs" / "other" / "SKILL.md")

    files = discover_skill_files(tmp_path, DEFAULT_SKILL_GLOBS, max_file_mb=2)

    assert [path.parent.name for path in files] == ["a-skill", "b-skill"]


def test_discover_skips_oversized_files(tmp_path: Path) -> None:
    _write(tmp_path / "skills" / "small" / "SKILL.md")
    _write(tmp_path / "skills" / "large" / "SKILL.md", "x" * (1024 * 1024 + 1))

    files = discover_skill_files(tmp_path, DEFAULT_SKILL_GLOBS, max_file_mb=1)

    assert [path.parent.name for path in files] == ["small"]


def test_discover_deduplicates_overlapping_globs(tmp_path: Path) -> None:
    _write(tmp_path / "skills" / "one" / "SKILL.md")

    files = discover_skill_files(tmp_path, ("skills/*/SKILL.md", "**/SKILL.md"), max_file_mb=2)

    assert len(files) == 1


def test_derive_slug_uses_folder_name(tmp_path: Path) -> None:
    path = _write(tmp_path / "skills" / "Rails TDD" / "SKILL.md")

    assert derive_slug(path, tmp_path) == "rails-tdd"


def test_derive_slug_for_file_in_root(tmp_path: Path) -> None:
    path = _write(tmp_path / "SKILL.md")

    assert derive_slug(path, tmp_path) == "skill"


@pytest.mark.parametrize(
    ("raw_name", "expected"),
    [
        ("", "unnamed-skill"),
        ("....", "unnamed-skill"),
        (" @Org/My Skill ", "org-my-skill"),
        ("dart_patterns", "dart_patterns"),
    ],
)
def test_sanitize_slug_edge_cases(raw_name: str, expected: str) -> None:
    assert sanitize_slug(raw_name) == expected


def test_find_slug_collisions_across_globs(tmp_path: Path) -> None:
    first = _write(tmp_path / "skills" / "ruby-testing" / "SKILL.md")
    second = _write(tmp_path / "vendor" / "Ruby-Testing" / "SKILL.md")
    unique = _write(tmp_path / "skills" / "dart-patterns" / "SKILL.md")

    collisions = find_slug_collisions([first, second, unique], tmp_path)

    assert list(collisions) == ["ruby-testing"]
    assert collisions["ruby-testing"] == (first.resolve(), second.resolve())


def test_discover_skips_absolute_patterns(tmp_path: Path) -> None:
    _write(tmp_path / "skills" / "a-skill" / "SKILL.md")
    absolute = (tmp_path / "skills" / "*" / "SKILL.md").as_posix()

    files = discover_skill_files(tmp_path, (absolute, *DEFAULT_SKILL_GLOBS), max_file_mb=2)

    assert [path.parent.name for path in files] == ["a-skill"]
