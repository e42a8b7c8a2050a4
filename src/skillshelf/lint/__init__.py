"""Structural lint checks for skill documents."""

from __future__ import annotations

from .checks import check_document
from .runner import lint_workspace

__all__ = ["check_document", "lint_workspace"]
