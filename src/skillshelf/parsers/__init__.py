"""Parsers for SKILL.md documents."""

from __future__ import annotations

from .skill_markdown import extract_code_blocks, extract_triggers, parse_skill_markdown_file, parse_skill_markdown_text

__all__ = [
    "extract_code_blocks",
    "extract_triggers",
    "parse_skill_markdown_file",
    "parse_skill_markdown_text",
]
