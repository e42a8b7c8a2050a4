"""Stable lint check codes, severities and messages."""

from __future__ import annotations

DOC001: str = "DOC001"  # unreadable or not UTF-8
DOC002: str = "DOC002"  # invalid frontmatter block
DOC003: str = "DOC003"  # unterminated fenced code block
DOC004: str = "DOC004"  # empty body
FM001: str = "FM001"  # frontmatter required but absent
FM002: str = "FM002"  # name missing or empty
FM003: str = "FM003"  # description missing or empty
FM004: str = "FM004"  # name differs from slug
CODE001: str = "CODE001"  # code fence without language tag
CODE002: str = "CODE002"  # language tag not allowed
SLUG001: str = "SLUG001"  # slug collision
SLUG002: str = "SLUG002"  # folder name not in slug form

CHECK_SEVERITIES: dict[str, str] = {
    DOC001: "error",
    DOC002: "error",
    DOC003: "error",
    DOC004: "warning",
    FM001: "error",
    FM002: "error",
    FM003: "error",
    FM004: "warning",
    CODE001: "error",
    CODE002: "warning",
    SLUG001: "error",
    SLUG002: "warning",
}

ALL_CHECK_CODES: frozenset[str] = frozenset(CHECK_SEVERITIES)

# Documents failing these get no further content checks.
BLOCKING_CHECK_CODES: frozenset[str] = frozenset({DOC001, DOC002})
