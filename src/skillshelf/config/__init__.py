"""Configuration loading, validation, and normalization for Skillshelf."""

from __future__ import annotations

from skillshelf.config.loader import load_config
from skillshelf.config.model import ShelfConfig
from skillshelf.config.validator import suggest_key, validate_config_file

__all__ = [
    "ShelfConfig",
    "load_config",
    "suggest_key",
    "validate_config_file",
]
