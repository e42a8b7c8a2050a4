"""Shared utility helpers."""

from __future__ import annotations

from .naming import sanitize_slug, tokenize

__all__ = ["sanitize_slug", "tokenize"]
