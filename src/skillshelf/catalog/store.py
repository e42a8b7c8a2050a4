"""In-memory, read-only catalog of skill documents."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from skillshelf.catalog.discovery import derive_slug, discover_skill_files, find_slug_collisions
from skillshelf.config import ShelfConfig
from skillshelf.constants.selection import (
    DESCRIPTION_TOKEN_WEIGHT,
    EXACT_SLUG_SCORE,
    NAME_TOKEN_WEIGHT,
    SLUG_TOKEN_WEIGHT,
    TITLE_TOKEN_WEIGHT,
    TRIGGER_TOKEN_WEIGHT,
)
from skillshelf.exceptions import DuplicateSlugError, SkillNotFoundError
from skillshelf.model import SkillDocument, SkillMatch
from skillshelf.parsers import parse_skill_markdown_file
from skillshelf.utils import sanitize_slug, tokenize

logger = logging.getLogger(__name__)


class SkillCatalog:
    """Skill documents keyed by slug, in slug order."""

    def __init__(self, root: Path, documents: list[SkillDocument]) -> None:
        self._root = root.resolve()
        by_slug: dict[str, SkillDocument] = {}
        for document in documents:
            existing = by_slug.get(document.slug)
            if existing is not None:
                raise DuplicateSlugError(document.slug, (existing.path, document.path))
            by_slug[document.slug] = document
        self._documents = dict(sorted(by_slug.items()))

    @property
    def root(self) -> Path:
        return self._root

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[SkillDocument]:
        return iter(self._documents.values())

    def __contains__(self, slug: object) -> bool:
        return slug in self._documents

    def slugs(self) -> tuple[str, ...]:
        return tuple(self._documents)

    def documents(self) -> tuple[SkillDocument, ...]:
        return tuple(self._documents.values())

    def get(self, slug: str) -> SkillDocument:
        """Return the document for *slug*, raising SkillNotFoundError if absent."""
        try:
            return self._documents[slug]
        except KeyError:
            raise SkillNotFoundError(slug) from None

    def select(self, query: str, *, limit: int | None = None) -> list[SkillMatch]:
        """Rank documents against a free-text topic query.

        Documents that share no token with the query are dropped. Ties are
        broken by slug so the ranking is stable.
        """
        tokens = tokenize(query)
        normalized_query = sanitize_slug(query) if query.strip() else ""
        matches: list[SkillMatch] = []
        for document in self._documents.values():
            score = _score_document(document, tokens)
            if normalized_query == document.slug:
                score += EXACT_SLUG_SCORE
            if score > 0:
                matches.append(SkillMatch(document=document, score=score))

        matches.sort(key=lambda match: (-match.score, match.slug))
        if limit is not None:
            matches = matches[: max(limit, 0)]
        return matches


def load_catalog(root: Path, config: ShelfConfig | None = None) -> SkillCatalog:
    """Discover and parse every skill document under *root*.

    Raises DuplicateSlugError when two files share a slug and
    SkillParseError when a document cannot be parsed.
    """
    config = config or ShelfConfig()
    resolved_root = root.resolve()
    skill_files = discover_skill_files(resolved_root, config.skill_globs, config.max_file_mb)

    collisions = find_slug_collisions(skill_files, resolved_root)
    if collisions:
        slug, paths = next(iter(collisions.items()))
        raise DuplicateSlugError(slug, paths)

    documents = [
        parse_skill_markdown_file(path, slug=derive_slug(path, resolved_root)) for path in skill_files
    ]
    logger.debug("Loaded %d skill documents from %s", len(documents), resolved_root)
    return SkillCatalog(resolved_root, documents)


def _score_document(document: SkillDocument, tokens: tuple[str, ...]) -> int:
    if not tokens:
        return 0
    slug_tokens = set(tokenize(document.slug))
    name_tokens = set(tokenize(document.name or ""))
    description_tokens = set(tokenize(document.description or ""))
    title_tokens = set(tokenize(document.title or ""))
    trigger_tokens: set[str] = set()
    for trigger in document.triggers:
        trigger_tokens.update(tokenize(trigger))

    score = 0
    for token in tokens:
        if token in slug_tokens:
            score += SLUG_TOKEN_WEIGHT
        if token in name_tokens:
            score += NAME_TOKEN_WEIGHT
        if token in trigger_tokens:
            score += TRIGGER_TOKEN_WEIGHT
        if token in description_tokens:
            score += DESCRIPTION_TOKEN_WEIGHT
        if token in title_tokens:
            score += TITLE_TOKEN_WEIGHT
    return score
