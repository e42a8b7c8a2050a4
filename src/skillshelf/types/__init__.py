"""Shared type aliases for Skillshelf."""

from .common import IssueSeverity, JsonObject, JsonScalar, JsonValue

__all__ = ["IssueSeverity", "JsonObject", "JsonScalar", "JsonValue"]
