"""Parser for SKILL.md files with YAML frontmatter."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from skillshelf.constants.parsing import (
    BULLET_PATTERN,
    FENCE_CLOSE_PATTERN,
    FENCE_OPEN_PATTERN,
    FRONTMATTER_ALT_DELIMITER,
    FRONTMATTER_DELIMITER,
    HEADING_PATTERN,
    TRIGGER_SECTION_PREFIXES,
    TRIGGERS_KEY,
)
from skillshelf.exceptions import SkillParseError
from skillshelf.model import CodeBlock, SkillDocument
from skillshelf.utils import sanitize_slug


def parse_skill_markdown_file(path: Path, *, slug: str | None = None) -> SkillDocument:
    """Parse a SKILL.md file into an immutable document."""
    try:
        raw_text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SkillParseError(f"{path} is not valid UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise SkillParseError(f"Cannot read {path}: {exc}") from exc

    return parse_skill_markdown_text(raw_text, path=path, slug=slug)


def parse_skill_markdown_text(raw_text: str, *, path: Path, slug: str | None = None) -> SkillDocument:
    """Parse SKILL.md content already read from *path*."""
    lines = raw_text.lstrip("\ufeff").splitlines()

    metadata: Mapping[str, Any] | None = None
    body_offset = 0

    if lines and lines[0].strip() == FRONTMATTER_DELIMITER:
        frontmatter_end = _find_frontmatter_end(lines)
        if frontmatter_end is None:
            raise SkillParseError(f"Unterminated frontmatter block in {path}")

        frontmatter_text = "\n".join(lines[1:frontmatter_end])
        try:
            payload = yaml.safe_load(frontmatter_text) if frontmatter_text.strip() else None
        except yaml.YAMLError as exc:
            raise SkillParseError(f"Failed to parse frontmatter in {path}: {exc}") from exc

        if payload is None:
            metadata = None
        elif isinstance(payload, dict):
            metadata = MappingProxyType(payload)
        else:
            raise SkillParseError(f"Frontmatter in {path} must be a YAML mapping")

        body_offset = frontmatter_end + 1

    body_lines = lines[body_offset:]
    leading_blank = 0
    for line in body_lines:
        if line.strip():
            break
        leading_blank += 1
    body_start_line = body_offset + leading_blank + 1
    body = "\n".join(body_lines).strip()

    code_blocks = extract_code_blocks(body_lines, first_line=body_offset + 1)

    return SkillDocument(
        slug=slug if slug is not None else sanitize_slug(path.parent.name),
        path=path,
        metadata=metadata,
        body=body,
        code_blocks=code_blocks,
        triggers=extract_triggers(metadata, body_lines),
        body_start_line=body_start_line,
        raw_text=raw_text,
    )


def extract_code_blocks(lines: Sequence[str], *, first_line: int = 1) -> tuple[CodeBlock, ...]:
    """Collect fenced code blocks; *first_line* is the file line of ``lines[0]``.

    A block closes on a bare fence of the same character that is at least as
    long as the opener. An opener still active at the end yields a block whose
    ``end_line`` is ``None``.
    """
    blocks: list[CodeBlock] = []
    opener: tuple[str, str, int] | None = None
    content: list[str] = []

    for offset, line in enumerate(lines):
        line_number = first_line + offset
        if opener is None:
            match = FENCE_OPEN_PATTERN.match(line)
            if not match:
                continue
            marker, info = match.group(1), match.group(2).strip()
            # Backtick fences may not carry backticks in the info string.
            if marker[0] == "`" and "`" in info:
                continue
            opener = (marker, info, line_number)
            content = []
            continue

        marker, info, start = opener
        close = FENCE_CLOSE_PATTERN.match(line)
        if close and close.group(1)[0] == marker[0] and len(close.group(1)) >= len(marker):
            blocks.append(_make_block(marker, info, start, line_number, content))
            opener = None
            continue
        content.append(line)

    if opener is not None:
        marker, info, start = opener
        blocks.append(_make_block(marker, info, start, None, content))

    return tuple(blocks)


def extract_triggers(metadata: Mapping[str, Any] | None, body_lines: Sequence[str]) -> tuple[str, ...]:
    """Return declared trigger phrases followed by "When to Use" bullet items."""
    triggers: list[str] = []

    if metadata is not None:
        declared = metadata.get(TRIGGERS_KEY)
        if isinstance(declared, str):
            declared = [declared]
        if isinstance(declared, list):
            triggers.extend(item.strip() for item in declared if isinstance(item, str) and item.strip())

    fenced = _fenced_lines(extract_code_blocks(body_lines), len(body_lines))
    section_level: int | None = None
    for line_number, line in enumerate(body_lines, start=1):
        if line_number in fenced:
            continue

        heading = HEADING_PATTERN.match(line)
        if heading:
            level = len(heading.group(1))
            if section_level is not None and level <= section_level:
                section_level = None
            if _is_trigger_heading(heading.group(2)):
                section_level = level
            continue

        if section_level is None:
            continue
        bullet = BULLET_PATTERN.match(line)
        if bullet:
            triggers.append(bullet.group(1))

    return tuple(dict.fromkeys(triggers))


def _is_trigger_heading(text: str) -> bool:
    return text.strip().lower().startswith(TRIGGER_SECTION_PREFIXES)


def _find_frontmatter_end(lines: list[str]) -> int | None:
    for index in range(1, len(lines)):
        if lines[index].strip() in {FRONTMATTER_DELIMITER, FRONTMATTER_ALT_DELIMITER}:
            return index
    return None


def _make_block(marker: str, info: str, start: int, end: int | None, content: list[str]) -> CodeBlock:
    language = info.split()[0] if info else None
    return CodeBlock(
        language=language,
        info=info,
        fence=marker,
        start_line=start,
        end_line=end,
        content="\n".join(content),
    )


def _fenced_lines(blocks: tuple[CodeBlock, ...], total_lines: int) -> set[int]:
    fenced: set[int] = set()
    for block in blocks:
        end = block.end_line if block.end_line is not None else total_lines
        fenced.update(range(block.start_line, end + 1))
    return fenced
