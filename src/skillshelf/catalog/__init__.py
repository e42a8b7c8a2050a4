"""Skill document discovery, loading and selection."""

from __future__ import annotations

from .discovery import derive_slug, discover_skill_files, find_slug_collisions
from .index import build_index
from .store import SkillCatalog, load_catalog

__all__ = [
    "SkillCatalog",
    "build_index",
    "derive_slug",
    "discover_skill_files",
    "find_slug_collisions",
    "load_catalog",
]
