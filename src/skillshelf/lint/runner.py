"""Workspace lint orchestration."""

from __future__ import annotations

import logging
from pathlib import Path

from skillshelf.catalog.discovery import (
    derive_slug,
    discover_skill_files,
    find_slug_collisions,
    stable_path_key,
)
from skillshelf.config import ShelfConfig
from skillshelf.constants.lint import DOC001, DOC002, SLUG001, SLUG002
from skillshelf.exceptions import SkillParseError
from skillshelf.lint.checks import check_document, make_issue
from skillshelf.model import LintIssue, LintReport
from skillshelf.parsers import parse_skill_markdown_text

logger = logging.getLogger(__name__)


def lint_workspace(root: Path, config: ShelfConfig | None = None) -> LintReport:
    """Lint every discovered skill document under *root*.

    Document problems never raise; each one becomes a ``LintIssue``.
    """
    config = config or ShelfConfig()
    resolved_root = root.resolve()
    enabled = config.enabled_checks
    skill_files = discover_skill_files(resolved_root, config.skill_globs, config.max_file_mb)
    logger.debug("Linting %d skill documents under %s", len(skill_files), resolved_root)

    issues: list[LintIssue] = []
    if SLUG001 in enabled:
        issues.extend(_collision_issues(skill_files, resolved_root))

    for path in skill_files:
        issues.extend(_lint_file(path, resolved_root, config))

    issues.sort(key=LintIssue.sort_key)
    report = LintReport(root=resolved_root, documents_checked=len(skill_files), issues=tuple(issues))
    logger.info(
        "Linted %d documents: %d errors, %d warnings",
        report.documents_checked,
        report.error_count,
        report.warning_count,
    )
    return report


def _lint_file(path: Path, root: Path, config: ShelfConfig) -> list[LintIssue]:
    enabled = config.enabled_checks
    slug = derive_slug(path, root)
    display_path = stable_path_key(path, root)
    issues: list[LintIssue] = []

    folder = path.parent.name
    if SLUG002 in enabled and path.parent != root and folder != slug:
        issues.append(
            make_issue(
                SLUG002,
                slug=slug,
                path=display_path,
                message=f"folder `{folder}` is not a normalized slug",
                hint=f"rename the folder to `{slug}`",
            )
        )

    try:
        raw_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        if DOC001 in enabled:
            issues.append(
                make_issue(DOC001, slug=slug, path=display_path, message=f"cannot read document as UTF-8: {exc}")
            )
        return issues

    try:
        document = parse_skill_markdown_text(raw_text, path=path, slug=slug)
    except SkillParseError as exc:
        if DOC002 in enabled:
            issues.append(make_issue(DOC002, slug=slug, path=display_path, line=1, message=str(exc)))
        return issues

    issues.extend(check_document(document, config, path=display_path))
    return issues


def _collision_issues(skill_files: list[Path], root: Path) -> list[LintIssue]:
    issues: list[LintIssue] = []
    for slug, paths in find_slug_collisions(skill_files, root).items():
        logger.warning("Slug %s is claimed by %d documents", slug, len(paths))
        keys = [stable_path_key(path, root) for path in paths]
        for key in keys:
            others = ", ".join(other for other in keys if other != key)
            issues.append(
                make_issue(
                    SLUG001,
                    slug=slug,
                    path=key,
                    message=f"slug `{slug}` is also used by {others}",
                    hint="skill folders must have unique names",
                )
            )
    return issues
