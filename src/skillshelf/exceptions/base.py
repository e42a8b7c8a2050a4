"""Base exception for Skillshelf."""

from __future__ import annotations


class SkillshelfError(Exception):
    """Base class for all errors raised by Skillshelf."""
