"""Shared exception hierarchy for Skillshelf."""

from __future__ import annotations

from .base import SkillshelfError
from .catalog import DuplicateSlugError, SkillNotFoundError
from .config import ConfigError
from .parsing import SkillParseError

__all__ = [
    "ConfigError",
    "DuplicateSlugError",
    "SkillNotFoundError",
    "SkillParseError",
    "SkillshelfError",
]
