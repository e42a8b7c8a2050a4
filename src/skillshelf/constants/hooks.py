"""Constants for the git write guard hook."""

from __future__ import annotations

GUARDED_TOOL_NAME: str = "Bash"

# Substring match, first hit in this order is reported.
BLOCKED_GIT_OPERATIONS: tuple[str, ...] = (
    "git commit",
    "git push",
    "git pull",
    "git merge",
    "git checkout",
    "git switch",
    "git branch -",
    "git branch -D",
    "git worktree add",
    "git worktree remove",
    "git reset",
    "git rebase",
    "git stash",
    "git cherry-pick",
    "git tag ",
    "git remote add",
    "git remote remove",
    "git remote set-url",
)

BLOCKED_POLICY_MESSAGE: str = "Policy: Git write operations must be performed manually by user."
ALLOWED_HINT_MESSAGE: str = "Read-only operations (status, diff, log) are allowed."
