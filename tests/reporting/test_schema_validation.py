"""Tests for JSON Schema validation of the lint report."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import jsonschema
import pytest

from skillshelf.constants.reporting import SCHEMA_VERSION
from skillshelf.lint import lint_workspace
from skillshelf.reporting import write_lint_report

SCHEMAS_DIR: Path = Path(__file__).resolve().parents[2] / "schemas"
LINT_REPORT_SCHEMA_PATH: Path = SCHEMAS_DIR / "lint-report.schema.json"


@pytest.fixture()
def lint_schema() -> dict[str, Any]:
    """Load the lint report JSON Schema."""
    return json.loads(LINT_REPORT_SCHEMA_PATH.read_text(encoding="utf-8"))


def test_lint_schema_is_valid_json_schema(lint_schema: dict[str, Any]) -> None:
    jsonschema.Draft202012Validator.check_schema(lint_schema)


def test_written_report_matches_schema(
    write_skill: Callable[..., Path],
    tmp_path: Path,
    lint_schema: dict[str, Any],
) -> None:
    write_skill("mixed", "---\nname: other\n---\n# Mixed\n\n```\nx\n```\n\n```ruby\nputs 1\n")
    out = tmp_path / "out" / "lint-report.json"

    write_lint_report(out, lint_workspace(tmp_path))
    payload = json.loads(out.read_text(encoding="utf-8"))

    jsonschema.validate(instance=payload, schema=lint_schema)
    assert payload["schema_version"] == SCHEMA_VERSION
    assert payload["counts_by_code"] == {"CODE001": 1, "DOC003": 1, "FM003": 1, "FM004": 1}
    assert not list(out.parent.glob(".tmp-*"))


def test_clean_report_matches_schema(basic_workspace: Path, lint_schema: dict[str, Any]) -> None:
    jsonschema.validate(instance=lint_workspace(basic_workspace).to_dict(), schema=lint_schema)


def test_schema_rejects_unknown_severity(basic_workspace: Path, lint_schema: dict[str, Any]) -> None:
    payload = lint_workspace(basic_workspace).to_dict()
    payload["issues"] = [
        {
            "code": "DOC001",
            "severity": "fatal",
            "slug": "x",
            "path": "skills/x/SKILL.md",
            "line": None,
            "message": "m",
            "hint": "",
        }
    ]

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance=payload, schema=lint_schema)
