"""Regex patterns for slug normalization and query tokenizing."""

from __future__ import annotations

import re
from re import Pattern

NON_SLUG_PATTERN: Pattern[str] = re.compile(r"[^a-z0-9._-]+")
COLLAPSE_DASH_PATTERN: Pattern[str] = re.compile(r"-{2,}")
WORD_TOKEN_PATTERN: Pattern[str] = re.compile(r"[a-z0-9]+")
MIN_TOKEN_LENGTH: int = 2
