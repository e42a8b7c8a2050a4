"""Output writers for lint reports and the skill index."""

from __future__ import annotations

from pathlib import Path

from skillshelf.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX
from skillshelf.io import write_json_atomic
from skillshelf.model import LintReport
from skillshelf.types import JsonObject


def write_lint_report(path: Path, report: LintReport) -> None:
    """Write the lint report JSON atomically."""
    write_json_atomic(
        path=path,
        payload=report.to_dict(),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )


def write_index(path: Path, entries: list[JsonObject]) -> None:
    """Write index entries as a JSON array atomically."""
    write_json_atomic(
        path=path,
        payload=entries,
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
