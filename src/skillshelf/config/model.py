"""Config data model for Skillshelf."""

from __future__ import annotations

from dataclasses import dataclass

from skillshelf.constants.config import DEFAULT_MAX_FILE_MB, DEFAULT_SKILL_GLOBS
from skillshelf.constants.lint import ALL_CHECK_CODES, FM004


@dataclass(frozen=True)
class ShelfConfig:
    """Resolved shelf config."""

    skill_globs: tuple[str, ...] = DEFAULT_SKILL_GLOBS
    max_file_mb: int = DEFAULT_MAX_FILE_MB
    require_frontmatter: bool = False
    name_must_match_slug: bool = True
    allowed_languages: tuple[str, ...] = ()
    disabled_checks: tuple[str, ...] = ()

    @property
    def enabled_checks(self) -> frozenset[str]:
        """Check codes that run under this config."""
        disabled = set(self.disabled_checks)
        if not self.name_must_match_slug:
            disabled.add(FM004)
        return ALL_CHECK_CODES - disabled

    def is_enabled(self, code: str) -> bool:
        return code in self.enabled_checks
