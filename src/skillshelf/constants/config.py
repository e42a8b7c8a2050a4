"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "skillshelf.yaml"
DEFAULT_MAX_FILE_MB: int = 2
DEFAULT_SKILL_GLOBS: tuple[str, ...] = ("skills/*/SKILL.md",)
