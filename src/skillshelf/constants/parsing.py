"""Constants for parsing behavior."""

from __future__ import annotations

import re
from re import Pattern

FRONTMATTER_DELIMITER: str = "---"
# YAML allows "..." as an explicit document end marker.
FRONTMATTER_ALT_DELIMITER: str = "..."

FENCE_OPEN_PATTERN: Pattern[str] = re.compile(r"^ {0,3}(`{3,}|~{3,})(.*)$")
FENCE_CLOSE_PATTERN: Pattern[str] = re.compile(r"^ {0,3}(`{3,}|~{3,})\s*$")
HEADING_PATTERN: Pattern[str] = re.compile(r"^(#{1,6})\s+(.+?)(?:\s+#+)?\s*$")
BULLET_PATTERN: Pattern[str] = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+(.+?)\s*$")

TRIGGERS_KEY: str = "triggers"
TRIGGER_SECTION_PREFIXES: tuple[str, ...] = (
    "when to use",
    "when to activate",
    "when to apply",
)
