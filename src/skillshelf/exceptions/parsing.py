"""Parsing-related exceptions."""

from __future__ import annotations

from skillshelf.exceptions.base import SkillshelfError


class SkillParseError(SkillshelfError, ValueError):
    """Raised when a SKILL.md file cannot be parsed."""
