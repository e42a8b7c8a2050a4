"""Human-readable stdout rendering for lint results and catalog listings."""

from __future__ import annotations

from skillshelf.catalog import SkillCatalog
from skillshelf.constants.branding import ASCII_LOGO_LINES, LINT_SUMMARY_TITLE
from skillshelf.constants.reporting import (
    ANSI_BOLD,
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    DESCRIPTION_PREVIEW_LENGTH,
    SEVERITY_COLORS,
)
from skillshelf.model import LintReport, SkillDocument, SkillMatch


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _color_severity(severity: str) -> str:
    color = SEVERITY_COLORS.get(severity, "")
    return _colorize(severity, color) if color else severity


def _preview(text: str | None, limit: int = DESCRIPTION_PREVIEW_LENGTH) -> str:
    if not text:
        return "-"
    single_line = " ".join(text.split())
    if len(single_line) <= limit:
        return single_line
    return single_line[: limit - 1].rstrip() + "…"


class LintStdoutReporter:
    """Formats a lint report as a header plus an issue table."""

    def __init__(self, report: LintReport, *, color: bool = True, verbose: bool = False, strict: bool = False) -> None:
        self._report = report
        self._color = color
        self._verbose = verbose
        self._strict = strict

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header(), self._render_issues()]
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        r = self._report
        sep = "  " + "─" * 38
        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {LINT_SUMMARY_TITLE}",
            sep,
            "",
            f"  Root        {r.root}",
            f"  Documents   {r.documents_checked}",
            f"  Issues      {self._format_counts()}",
        ]
        if self._verbose and r.counts_by_code:
            by_code = " · ".join(f"{code} {count}" for code, count in r.counts_by_code.items())
            lines.append(f"  By check    {by_code}")
        lines.append(f"  Verdict     {self._render_verdict()}")
        lines.append("")
        return "\n".join(lines)

    def _format_counts(self) -> str:
        r = self._report
        errors = _color_severity("error") if self._color else "error"
        warnings = _color_severity("warning") if self._color else "warning"
        return f"{r.error_count} {errors} · {r.warning_count} {warnings}"

    def _render_verdict(self) -> str:
        failed = not self._report.ok or (self._strict and self._report.warning_count > 0)
        state = "FAIL" if failed else "PASS"
        if self._color:
            return _colorize(state, ANSI_RED if failed else ANSI_GREEN)
        return state

    def _render_issues(self) -> str:
        issues = self._report.issues
        if not issues:
            return ""

        width_location = max(len(_location(issue.path, issue.line)) for issue in issues)
        lines = ["  Issues"]
        for issue in issues:
            location = _location(issue.path, issue.line)
            severity = _color_severity(issue.severity) if self._color else issue.severity
            padding = " " * (len("warning") - len(issue.severity))
            lines.append(f"  {location:<{width_location}}  {issue.code:<7}  {severity}{padding}  {issue.message}")
            if self._verbose and issue.hint:
                hint = _colorize(issue.hint, ANSI_DIM) if self._color else issue.hint
                lines.append(f"  {'':<{width_location}}  {'':<7}  {'':<7}  hint: {hint}")
        lines.append("")
        return "\n".join(lines)


def _location(path: str, line: int | None) -> str:
    return f"{path}:{line}" if line is not None else path


def render_catalog_table(catalog: SkillCatalog) -> str:
    """Render one row per document: slug, declared name, description preview."""
    documents = catalog.documents()
    if not documents:
        return f"No skill documents found under {catalog.root}"

    w_slug = max(len("Slug"), *(len(document.slug) for document in documents))
    w_name = max(len("Name"), *(len(document.name or "-") for document in documents))
    lines = [
        f"{'Slug':<{w_slug}}  {'Name':<{w_name}}  Description",
        f"{'─' * w_slug}  {'─' * w_name}  {'─' * 11}",
    ]
    for document in documents:
        lines.append(f"{document.slug:<{w_slug}}  {document.name or '-':<{w_name}}  {_preview(document.description)}")
    return "\n".join(lines)


def render_document(document: SkillDocument, *, color: bool = False) -> str:
    """Render a metadata summary followed by the full body."""
    heading = document.slug
    lines = [_colorize(heading, ANSI_BOLD) if color else heading]
    lines.append(f"  name         {document.name or '-'}")
    lines.append(f"  description  {document.description or '-'}")
    if document.triggers:
        lines.append("  triggers")
        lines.extend(f"    - {trigger}" for trigger in document.triggers)
    languages = ", ".join(document.code_languages) or "-"
    lines.append(f"  code blocks  {len(document.code_blocks)} ({languages})")
    lines.append("")
    lines.append(document.body)
    return "\n".join(lines)


def render_code_blocks(document: SkillDocument) -> str:
    """Render only the fenced code blocks, each re-fenced with its language."""
    chunks: list[str] = []
    for block in document.code_blocks:
        chunks.append(f"{block.fence}{block.info}\n{block.content}\n{block.fence}")
    return "\n\n".join(chunks)


def render_matches(matches: list[SkillMatch]) -> str:
    """Render ranked selection results."""
    if not matches:
        return "No matching skill documents."
    w_slug = max(len(match.slug) for match in matches)
    return "\n".join(
        f"{match.score:>4}  {match.slug:<{w_slug}}  {_preview(match.document.description)}" for match in matches
    )
