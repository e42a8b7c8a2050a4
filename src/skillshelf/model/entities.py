"""Dataclasses for skill documents, lint results and hook decisions."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from skillshelf.constants.parsing import HEADING_PATTERN
from skillshelf.constants.reporting import SCHEMA_VERSION
from skillshelf.types import IssueSeverity, JsonObject


@dataclass(frozen=True)
class CodeBlock:
    """A fenced code block inside a document body."""

    language: str | None
    info: str
    fence: str
    start_line: int
    end_line: int | None
    content: str

    @property
    def closed(self) -> bool:
        return self.end_line is not None


@dataclass(frozen=True)
class SkillDocument:
    """A parsed SKILL.md file. Never mutated after parsing."""

    slug: str
    path: Path
    metadata: Mapping[str, Any] | None
    body: str
    code_blocks: tuple[CodeBlock, ...]
    triggers: tuple[str, ...]
    body_start_line: int
    raw_text: str = field(repr=False)

    @property
    def name(self) -> str | None:
        return self._metadata_text("name")

    @property
    def description(self) -> str | None:
        return self._metadata_text("description")

    @property
    def title(self) -> str | None:
        """Return the first level-1 heading outside code blocks."""
        for offset, line in enumerate(self.body.splitlines()):
            if self._in_code_block(self.body_start_line + offset):
                continue
            match = HEADING_PATTERN.match(line)
            if match and len(match.group(1)) == 1:
                return match.group(2)
        return None

    @property
    def code_languages(self) -> tuple[str, ...]:
        return tuple(sorted({block.language for block in self.code_blocks if block.language}))

    def _metadata_text(self, key: str) -> str | None:
        if self.metadata is None:
            return None
        value = self.metadata.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    def _in_code_block(self, line: int) -> bool:
        for block in self.code_blocks:
            if block.start_line <= line and (block.end_line is None or line <= block.end_line):
                return True
        return False


@dataclass(frozen=True)
class SkillMatch:
    """A scored selection result."""

    document: SkillDocument
    score: int

    @property
    def slug(self) -> str:
        return self.document.slug


@dataclass(frozen=True)
class LintIssue:
    """A single structural problem found in a document."""

    code: str
    severity: IssueSeverity
    slug: str
    path: str
    message: str
    line: int | None = None
    hint: str = ""

    def sort_key(self) -> tuple[str, int, str]:
        return (self.path, self.line or 0, self.code)

    def to_dict(self) -> JsonObject:
        return {
            "code": self.code,
            "severity": self.severity,
            "slug": self.slug,
            "path": self.path,
            "line": self.line,
            "message": self.message,
            "hint": self.hint,
        }


@dataclass(frozen=True)
class LintReport:
    """Outcome of linting a workspace."""

    root: Path
    documents_checked: int
    issues: tuple[LintIssue, ...]

    @property
    def error_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity == "error")

    @property
    def warning_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity == "warning")

    @property
    def ok(self) -> bool:
        return self.error_count == 0

    @property
    def counts_by_code(self) -> dict[str, int]:
        return dict(sorted(Counter(issue.code for issue in self.issues).items()))

    def to_dict(self) -> JsonObject:
        return {
            "schema_version": SCHEMA_VERSION,
            "root": str(self.root),
            "documents_checked": self.documents_checked,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "counts_by_code": dict(self.counts_by_code),
            "issues": [issue.to_dict() for issue in self.issues],
        }


@dataclass(frozen=True)
class HookDecision:
    """Verdict of the git write guard for one tool-use payload."""

    allowed: bool
    operation: str | None = None
