"""Catalog lookup and loading exceptions."""

from __future__ import annotations

from pathlib import Path

from skillshelf.exceptions.base import SkillshelfError


class SkillNotFoundError(SkillshelfError, KeyError):
    """Raised when a slug is not present in the catalog."""

    def __init__(self, slug: str) -> None:
        super().__init__(slug)
        self.slug = slug

    def __str__(self) -> str:
        return f"Unknown skill: {self.slug}"


class DuplicateSlugError(SkillshelfError, ValueError):
    """Raised when two documents resolve to the same slug."""

    def __init__(self, slug: str, paths: tuple[Path, ...]) -> None:
        joined = ", ".join(str(path) for path in paths)
        super().__init__(f"Slug {slug!r} is claimed by multiple documents: {joined}")
        self.slug = slug
        self.paths = paths
