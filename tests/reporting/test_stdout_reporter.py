"""Tests for stdout rendering of lint reports and catalog listings."""

from __future__ import annotations

from pathlib import Path

from skillshelf.catalog import load_catalog
from skillshelf.constants.reporting import ANSI_RED, ANSI_RESET
from skillshelf.model import LintIssue, LintReport
from skillshelf.reporting import (
    LintStdoutReporter,
    render_catalog_table,
    render_code_blocks,
    render_document,
    render_matches,
)


def _report(*issues: LintIssue) -> LintReport:
    return LintReport(root=Path("/work"), documents_checked=2, issues=issues)


def _issue(code: str, severity: str, line: int | None = 3, hint: str = "") -> LintIssue:
    return LintIssue(
        code=code,
        severity=severity,  # type: ignore[arg-type]
        slug="demo",
        path="skills/demo/SKILL.md",
        message=f"{code} message",
        line=line,
        hint=hint,
    )


def test_header_counts_and_pass_verdict() -> None:
    output = LintStdoutReporter(_report(), color=False).render()

    assert ">_ SKILLSHELF" in output
    assert "Documents   2" in output
    assert "Issues      0 error · 0 warning" in output
    assert "Verdict     PASS" in output
    assert "  Issues\n" not in output


def test_issue_rows_and_fail_verdict() -> None:
    report = _report(_issue("CODE001", "error"), _issue("FM004", "warning", line=None))

    output = LintStdoutReporter(report, color=False).render()

    assert "Verdict     FAIL" in output
    assert "skills/demo/SKILL.md:3  CODE001  error    CODE001 message" in output
    assert "skills/demo/SKILL.md    FM004    warning  FM004 message" in output


def test_strict_fails_on_warnings_only() -> None:
    report = _report(_issue("FM004", "warning"))

    assert "Verdict     PASS" in LintStdoutReporter(report, color=False).render()
    assert "Verdict     FAIL" in LintStdoutReporter(report, color=False, strict=True).render()


def test_verbose_shows_hints_and_code_counts() -> None:
    report = _report(_issue("CODE001", "error", hint="add a tag"))

    output = LintStdoutReporter(report, color=False, verbose=True).render()

    assert "By check    CODE001 1" in output
    assert "hint: add a tag" in output


def test_color_wraps_errors() -> None:
    output = LintStdoutReporter(_report(_issue("DOC003", "error")), color=True).render()

    assert f"{ANSI_RED}error{ANSI_RESET}" in output


def test_render_catalog_table(basic_workspace: Path) -> None:
    output = render_catalog_table(load_catalog(basic_workspace))
    lines = output.splitlines()

    assert lines[0].startswith("Slug")
    assert lines[2].startswith("alpha-tool  alpha-tool  Deploy containers")
    assert lines[3].startswith("beta-guide  -")


def test_render_catalog_table_empty(tmp_path: Path) -> None:
    assert render_catalog_table(load_catalog(tmp_path)).startswith("No skill documents found")


def test_render_document_lists_metadata_then_body(basic_workspace: Path) -> None:
    document = load_catalog(basic_workspace).get("alpha-tool")

    output = render_document(document)

    assert output.startswith("alpha-tool\n")
    assert "    - deploy containers" in output
    assert "  code blocks  1 (bash)" in output
    assert output.endswith(document.body)


def test_render_code_blocks_refences(basic_workspace: Path) -> None:
    document = load_catalog(basic_workspace).get("beta-guide")

    assert render_code_blocks(document) == (
        "```ruby\nRSpec.describe Beta do\n  it { is_expected.to be_valid }\nend\n```"
    )


def test_render_matches(basic_workspace: Path) -> None:
    catalog = load_catalog(basic_workspace)

    assert render_matches([]) == "No matching skill documents."
    assert render_matches(catalog.select("containers")).startswith("  10  alpha-tool")
