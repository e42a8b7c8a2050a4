"""Per-document lint checks.

Each check takes a parsed document and the active config and yields
``LintIssue`` objects. Checks that need the raw file (readability, frontmatter
syntax) live in the runner because they run before a document exists.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TypeAlias

from skillshelf.config import ShelfConfig
from skillshelf.constants.lint import (
    CHECK_SEVERITIES,
    CODE001,
    CODE002,
    DOC003,
    DOC004,
    FM001,
    FM002,
    FM003,
    FM004,
)
from skillshelf.model import LintIssue, SkillDocument

DocumentCheck: TypeAlias = Callable[[SkillDocument, ShelfConfig, str], Iterator[LintIssue]]


def make_issue(
    code: str,
    *,
    slug: str,
    path: str,
    message: str,
    line: int | None = None,
    hint: str = "",
) -> LintIssue:
    """Build an issue with the severity registered for *code*."""
    return LintIssue(
        code=code,
        severity=CHECK_SEVERITIES[code],  # type: ignore[arg-type]
        slug=slug,
        path=path,
        message=message,
        line=line,
        hint=hint,
    )


def check_unterminated_fences(document: SkillDocument, config: ShelfConfig, path: str) -> Iterator[LintIssue]:
    for block in document.code_blocks:
        if not block.closed:
            yield make_issue(
                DOC003,
                slug=document.slug,
                path=path,
                line=block.start_line,
                message=f"fenced code block opened with `{block.fence}` is never closed",
                hint=f"add a closing `{block.fence}` line",
            )


def check_empty_body(document: SkillDocument, config: ShelfConfig, path: str) -> Iterator[LintIssue]:
    if not document.body:
        yield make_issue(DOC004, slug=document.slug, path=path, message="document body is empty")


def check_frontmatter(document: SkillDocument, config: ShelfConfig, path: str) -> Iterator[LintIssue]:
    if document.metadata is None:
        if config.require_frontmatter:
            yield make_issue(
                FM001,
                slug=document.slug,
                path=path,
                line=1,
                message="document has no frontmatter",
                hint="start the file with a `---` block declaring `name` and `description`",
            )
        return

    if document.name is None:
        yield make_issue(
            FM002,
            slug=document.slug,
            path=path,
            line=_frontmatter_key_line(document, "name"),
            message=_missing_field_message(document, "name"),
        )
    if document.description is None:
        yield make_issue(
            FM003,
            slug=document.slug,
            path=path,
            line=_frontmatter_key_line(document, "description"),
            message=_missing_field_message(document, "description"),
        )


def check_name_matches_slug(document: SkillDocument, config: ShelfConfig, path: str) -> Iterator[LintIssue]:
    name = document.name
    if name is None or name == document.slug:
        return
    yield make_issue(
        FM004,
        slug=document.slug,
        path=path,
        line=_frontmatter_key_line(document, "name"),
        message=f"frontmatter name `{name}` differs from slug `{document.slug}`",
        hint="rename the folder or the `name` field so they agree",
    )


def check_code_languages(document: SkillDocument, config: ShelfConfig, path: str) -> Iterator[LintIssue]:
    allowed = set(config.allowed_languages)
    for block in document.code_blocks:
        if block.language is None:
            yield make_issue(
                CODE001,
                slug=document.slug,
                path=path,
                line=block.start_line,
                message="fenced code block has no language tag",
                hint=f"write `{block.fence}bash`, `{block.fence}text` or similar",
            )
        elif allowed and block.language.lower() not in allowed:
            yield make_issue(
                CODE002,
                slug=document.slug,
                path=path,
                line=block.start_line,
                message=f"language tag `{block.language}` is not in allowed_languages",
            )


DOCUMENT_CHECKS: tuple[tuple[frozenset[str], DocumentCheck], ...] = (
    (frozenset({DOC003}), check_unterminated_fences),
    (frozenset({DOC004}), check_empty_body),
    (frozenset({FM001, FM002, FM003}), check_frontmatter),
    (frozenset({FM004}), check_name_matches_slug),
    (frozenset({CODE001, CODE002}), check_code_languages),
)


def check_document(document: SkillDocument, config: ShelfConfig, *, path: str | None = None) -> list[LintIssue]:
    """Run every enabled content check against one document."""
    display_path = path if path is not None else str(document.path)
    enabled = config.enabled_checks
    issues: list[LintIssue] = []
    for codes, check in DOCUMENT_CHECKS:
        if not codes & enabled:
            continue
        issues.extend(issue for issue in check(document, config, display_path) if issue.code in enabled)
    return issues


def _missing_field_message(document: SkillDocument, key: str) -> str:
    assert document.metadata is not None
    if key not in document.metadata:
        return f"frontmatter is missing `{key}`"
    value = document.metadata[key]
    if not isinstance(value, str):
        return f"frontmatter `{key}` must be a string, got {type(value).__name__}"
    return f"frontmatter `{key}` is empty"


def _frontmatter_key_line(document: SkillDocument, key: str) -> int | None:
    """Return the file line declaring a top-level frontmatter key."""
    lines = document.raw_text.lstrip("\ufeff").splitlines()
    prefix = f"{key}:"
    for index in range(1, max(document.body_start_line - 1, 1)):
        if index >= len(lines):
            break
        if lines[index].startswith(prefix):
            return index + 1
    return 1
