"""Pre-tool-use hook that blocks git write operations.

The assistant pipes a JSON tool-use payload on stdin. Shell commands that
contain a git write operation are rejected with exit code 1; everything
else, including payloads the hook cannot understand, is allowed.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TextIO

from skillshelf.constants.hooks import (
    ALLOWED_HINT_MESSAGE,
    BLOCKED_GIT_OPERATIONS,
    BLOCKED_POLICY_MESSAGE,
    GUARDED_TOOL_NAME,
)
from skillshelf.model import HookDecision

logger = logging.getLogger(__name__)


def evaluate_tool_use(payload: dict[str, Any]) -> HookDecision:
    """Decide whether a tool-use payload may proceed."""
    if payload.get("tool") != GUARDED_TOOL_NAME:
        return HookDecision(allowed=True)

    parameters = payload.get("parameters")
    command = parameters.get("command") if isinstance(parameters, dict) else None
    if not isinstance(command, str):
        command = ""

    for operation in BLOCKED_GIT_OPERATIONS:
        if operation in command:
            return HookDecision(allowed=False, operation=operation)
    return HookDecision(allowed=True)


def run_git_guard(stdin: TextIO, stderr: TextIO) -> int:
    """Read one payload from *stdin* and return the hook exit code."""
    try:
        payload = json.loads(stdin.read())
    except (ValueError, RecursionError) as exc:
        # A broken hook must not block the assistant.
        print(f"Error in git guard hook: {exc}", file=stderr)
        logger.debug("Allowing unreadable payload: %s", type(exc).__name__)
        return 0

    if not isinstance(payload, dict):
        print(f"Error in git guard hook: expected a JSON object, got {type(payload).__name__}", file=stderr)
        return 0

    decision = evaluate_tool_use(payload)
    if decision.allowed:
        return 0

    print(f'\nGit write operation blocked: "{decision.operation}"', file=stderr)
    print(BLOCKED_POLICY_MESSAGE, file=stderr)
    print(f"{ALLOWED_HINT_MESSAGE}\n", file=stderr)
    return 1
