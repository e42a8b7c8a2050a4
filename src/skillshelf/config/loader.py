"""Config loading and normalization for Skillshelf."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from skillshelf.config.model import ShelfConfig
from skillshelf.constants.config import CONFIG_FILENAME, DEFAULT_MAX_FILE_MB, DEFAULT_SKILL_GLOBS
from skillshelf.constants.lint import ALL_CHECK_CODES
from skillshelf.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> ShelfConfig:
    """Load and validate shelf config from ``skillshelf.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No config at %s, using defaults", path)
        return ShelfConfig()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    max_file_mb = raw.get("max_file_mb", DEFAULT_MAX_FILE_MB)
    if isinstance(max_file_mb, bool) or not isinstance(max_file_mb, int) or max_file_mb <= 0:
        raise ConfigError("max_file_mb must be a positive integer")

    require_frontmatter = raw.get("require_frontmatter", False)
    if not isinstance(require_frontmatter, bool):
        raise ConfigError("require_frontmatter must be a boolean")

    name_must_match_slug = raw.get("name_must_match_slug", True)
    if not isinstance(name_must_match_slug, bool):
        raise ConfigError("name_must_match_slug must be a boolean")

    skill_globs = tuple(
        pattern.strip()
        for pattern in _ensure_string_list(raw.get("skill_globs", list(DEFAULT_SKILL_GLOBS)), "skill_globs")
        if pattern.strip()
    )
    if not skill_globs:
        raise ConfigError("skill_globs must contain at least one pattern")
    absolute = [pattern for pattern in skill_globs if Path(pattern).is_absolute()]
    if absolute:
        raise ConfigError(f"skill_globs patterns must be relative to the root: {', '.join(absolute)}")

    disabled_checks = tuple(
        code.strip().upper()
        for code in _ensure_string_list(raw.get("disabled_checks", []), "disabled_checks")
        if code.strip()
    )
    unknown = sorted(set(disabled_checks) - ALL_CHECK_CODES)
    if unknown:
        raise ConfigError(f"disabled_checks contains unknown check codes: {', '.join(unknown)}")

    return ShelfConfig(
        skill_globs=skill_globs,
        max_file_mb=max_file_mb,
        require_frontmatter=require_frontmatter,
        name_must_match_slug=name_must_match_slug,
        allowed_languages=_normalize_languages(
            _ensure_string_list(raw.get("allowed_languages", []), "allowed_languages")
        ),
        disabled_checks=tuple(sorted(set(disabled_checks))),
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _normalize_languages(languages: list[str]) -> tuple[str, ...]:
    """Lowercase, strip, deduplicate and sort language tags."""
    return tuple(sorted({language.strip().lower() for language in languages if language.strip()}))
