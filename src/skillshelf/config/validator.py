"""Config file validation for Skillshelf."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from skillshelf.constants.config import CONFIG_FILENAME
from skillshelf.constants.lint import ALL_CHECK_CODES
from skillshelf.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    BOOLEAN_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    LIST_OF_STRINGS_KEYS,
)
from skillshelf.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a skillshelf.yaml file and return all validation errors.

    This is the collect-all counterpart of :func:`load_config` used by
    ``skillshelf validate-config`` and the preflight of every other command.
    Problems that stop the file from being read (missing, unreadable, broken
    YAML, not a mapping) are reported alone; everything else is collected.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if not config_explicit:
            return []
        return [ValidationError(code=CFG001, path=path_str, field="", message=f"config file not found: {path}")]

    raw, read_error = _read_raw_config(path)
    if read_error is not None:
        return [read_error]
    if raw is None:
        return []
    if not isinstance(raw, dict):
        return [
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        ]

    errors: list[ValidationError] = []
    _validate_keys(raw, path_str, errors)
    _validate_max_file_mb(raw, path_str, errors)
    _validate_value_types(raw, path_str, errors)
    _validate_skill_globs(raw, path_str, errors)
    _validate_disabled_checks(raw, path_str, errors)
    return errors


def _read_raw_config(path: Path) -> tuple[Any, ValidationError | None]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return None, ValidationError(
            code=CFG008,
            path=str(path),
            field="",
            message=f"cannot read config file: {exc}",
        )
    try:
        return yaml.safe_load(text), None
    except yaml.YAMLError as exc:
        return None, ValidationError(code=CFG002, path=str(path), field="", message=f"invalid YAML: {exc}")


def _validate_keys(raw: dict[str, Any], path_str: str, errors: list[ValidationError]) -> None:
    for key in sorted(raw.keys(), key=str):
        if key in ALLOWED_CONFIG_KEYS:
            continue
        errors.append(
            ValidationError(
                code=CFG004,
                path=path_str,
                field=str(key),
                message=f"unknown key `{key}`",
                hint=suggest_key(str(key), ALLOWED_CONFIG_KEYS),
            )
        )


def _validate_max_file_mb(raw: dict[str, Any], path_str: str, errors: list[ValidationError]) -> None:
    if "max_file_mb" not in raw:
        return
    val = raw["max_file_mb"]
    if isinstance(val, bool) or not isinstance(val, int):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="max_file_mb",
                message="invalid type for `max_file_mb`",
                hint="expected a positive integer",
            )
        )
    elif val <= 0:
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field="max_file_mb",
                message=f"`max_file_mb` must be a positive integer, got {val}",
            )
        )


def _validate_value_types(raw: dict[str, Any], path_str: str, errors: list[ValidationError]) -> None:
    """Boolean flags and string lists must carry the declared type."""
    for key in BOOLEAN_KEYS:
        if key in raw and not isinstance(raw[key], bool):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message=f"invalid type for `{key}`",
                    hint="expected a boolean",
                )
            )

    for key in LIST_OF_STRINGS_KEYS:
        val = raw.get(key)
        if val is None or (isinstance(val, (list, tuple)) and all(isinstance(item, str) for item in val)):
            continue
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field=key,
                message=f"invalid type for `{key}`",
                hint="expected a list of strings",
            )
        )


def _validate_skill_globs(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """An explicit ``skill_globs`` list must hold at least one root-relative pattern."""
    val = raw.get("skill_globs")
    if not isinstance(val, list) or not all(isinstance(i, str) for i in val):
        return
    patterns = [pattern.strip() for pattern in val if pattern.strip()]
    if not patterns:
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field="skill_globs",
                message="`skill_globs` must contain at least one pattern",
            )
        )
    for pattern in patterns:
        if Path(pattern).is_absolute():
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field="skill_globs",
                    message=f"`skill_globs` pattern `{pattern}` must be relative to the root",
                )
            )


def _validate_disabled_checks(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Every entry of ``disabled_checks`` must name a known check code."""
    val = raw.get("disabled_checks")
    if not isinstance(val, list):
        return
    for code in val:
        if not isinstance(code, str) or not code.strip():
            continue
        normalized = code.strip().upper()
        if normalized in ALL_CHECK_CODES:
            continue
        errors.append(
            ValidationError(
                code=CFG006,
                path=path_str,
                field="disabled_checks",
                message=f"unknown check code `{code}`",
                hint=suggest_key(normalized, ALL_CHECK_CODES),
            )
        )


def suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
