"""Pre-tool-use hooks for coding assistants."""

from __future__ import annotations

from .git_guard import evaluate_tool_use, run_git_guard

__all__ = ["evaluate_tool_use", "run_git_guard"]
