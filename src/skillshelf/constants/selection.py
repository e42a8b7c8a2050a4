"""Weights for topic-based document selection."""

from __future__ import annotations

EXACT_SLUG_SCORE: int = 100
SLUG_TOKEN_WEIGHT: int = 10
NAME_TOKEN_WEIGHT: int = 8
TRIGGER_TOKEN_WEIGHT: int = 6
DESCRIPTION_TOKEN_WEIGHT: int = 4
TITLE_TOKEN_WEIGHT: int = 2
