"""Core data models for Skillshelf."""

from .entities import CodeBlock, HookDecision, LintIssue, LintReport, SkillDocument, SkillMatch

__all__ = [
    "CodeBlock",
    "HookDecision",
    "LintIssue",
    "LintReport",
    "SkillDocument",
    "SkillMatch",
]
