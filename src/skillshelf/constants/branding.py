"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SKILLSHELF"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ SKILLSHELF",
    "     // guidance documents for coding assistants",
)
LINT_SUMMARY_TITLE: str = "Lint summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} skill document tooling"))
