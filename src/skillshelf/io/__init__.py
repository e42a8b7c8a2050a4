"""Shared file I/O helpers."""

from .json_io import dump_json_text, write_json_atomic

__all__ = ["dump_json_text", "write_json_atomic"]
