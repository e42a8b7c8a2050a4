"""Constants for filesystem discovery and slug derivation."""

from __future__ import annotations

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
SKILL_SLUG_FALLBACK: str = "unnamed-skill"
