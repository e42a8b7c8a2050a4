"""Command-line interface for Skillshelf."""
