"""Index entries consumed by external skill loaders."""

from __future__ import annotations

from skillshelf.catalog.discovery import stable_path_key
from skillshelf.catalog.store import SkillCatalog
from skillshelf.types import JsonObject


def build_index(catalog: SkillCatalog) -> list[JsonObject]:
    """Return one JSON-ready entry per document, in slug order."""
    return [
        {
            "slug": document.slug,
            "name": document.name,
            "description": document.description,
            "triggers": list(document.triggers),
            "path": stable_path_key(document.path, catalog.root),
            "code_languages": list(document.code_languages),
        }
        for document in catalog
    ]
