"""Shared constants for Skillshelf."""
