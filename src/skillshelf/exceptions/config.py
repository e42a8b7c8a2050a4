"""Configuration-related exceptions."""

from __future__ import annotations

from skillshelf.exceptions.base import SkillshelfError


class ConfigError(SkillshelfError, ValueError):
    """Raised when shelf configuration is invalid."""
