"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # unknown check code
CFG007: str = "CFG007"  # value out of range
CFG008: str = "CFG008"  # config file cannot be read
CFG010: str = "CFG010"  # root directory not found

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "skill_globs",
        "max_file_mb",
        "require_frontmatter",
        "name_must_match_slug",
        "allowed_languages",
        "disabled_checks",
    }
)

LIST_OF_STRINGS_KEYS: tuple[str, ...] = (
    "skill_globs",
    "allowed_languages",
    "disabled_checks",
)

BOOLEAN_KEYS: tuple[str, ...] = (
    "require_frontmatter",
    "name_must_match_slug",
)
