"""Terminal rendering and JSON writers."""

from __future__ import annotations

from .stdout import (
    LintStdoutReporter,
    render_catalog_table,
    render_code_blocks,
    render_document,
    render_matches,
)
from .writer import write_index, write_lint_report

__all__ = [
    "LintStdoutReporter",
    "render_catalog_table",
    "render_code_blocks",
    "render_document",
    "render_matches",
    "write_index",
    "write_lint_report",
]
