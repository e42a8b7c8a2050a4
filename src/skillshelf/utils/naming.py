"""String normalization helpers for slugs and topic queries."""

from __future__ import annotations

from skillshelf.constants.discovery import SKILL_SLUG_FALLBACK
from skillshelf.constants.naming import (
    COLLAPSE_DASH_PATTERN,
    MIN_TOKEN_LENGTH,
    NON_SLUG_PATTERN,
    WORD_TOKEN_PATTERN,
)


def sanitize_slug(raw_name: str) -> str:
    """Normalize a folder or declared name into a stable slug."""
    normalized = raw_name.strip().lower()
    normalized = NON_SLUG_PATTERN.sub("-", normalized)
    normalized = COLLAPSE_DASH_PATTERN.sub("-", normalized)
    normalized = normalized.strip("-._")
    return normalized or SKILL_SLUG_FALLBACK


def tokenize(text: str) -> tuple[str, ...]:
    """Split free text into lowercase word tokens, dropping one-letter words."""
    tokens = WORD_TOKEN_PATTERN.findall(text.lower())
    return tuple(dict.fromkeys(token for token in tokens if len(token) >= MIN_TOKEN_LENGTH))
