"""File discovery and slug derivation."""

from __future__ import annotations

import logging
from pathlib import Path

from skillshelf.constants.discovery import SKILL_MARKDOWN_FILENAME
from skillshelf.utils import sanitize_slug

logger = logging.getLogger(__name__)


def discover_skill_files(root: Path, skill_globs: tuple[str, ...], max_file_mb: int) -> list[Path]:
    """Discover SKILL.md files by configured glob patterns."""
    discovered: set[Path] = set()
    size_limit_bytes = max_file_mb * 1024 * 1024
    resolved_root = root.resolve()

    for pattern in skill_globs:
        if Path(pattern).is_absolute():
            logger.warning("Skipping glob %s: patterns must be relative to %s", pattern, resolved_root)
            continue
        for path in resolved_root.glob(pattern):
            if not path.is_file() or path.name != SKILL_MARKDOWN_FILENAME:
                continue
            try:
                size = path.stat().st_size
            except OSError as exc:
                logger.warning("Cannot stat %s: %s", path, exc)
                continue
            if size > size_limit_bytes:
                logger.warning("Skipping %s: %d bytes exceeds the %d MB limit", path, size, max_file_mb)
                continue
            discovered.add(path.resolve())

    return sorted(discovered, key=lambda path: stable_path_key(path, resolved_root))


def derive_slug(file_path: Path, root: Path) -> str:
    """Derive the slug of a SKILL.md file from its folder name."""
    root = root.resolve()
    file_path = file_path.resolve()
    if file_path.parent != root:
        return sanitize_slug(file_path.parent.name)
    return sanitize_slug(_fallback_relative_name(file_path, root))


def find_slug_collisions(skill_files: list[Path], root: Path) -> dict[str, tuple[Path, ...]]:
    """Return slugs claimed by more than one file, with the files sorted by path."""
    resolved_root = root.resolve()
    paths_by_slug: dict[str, list[Path]] = {}
    for path in skill_files:
        paths_by_slug.setdefault(derive_slug(path, resolved_root), []).append(path.resolve())

    collisions: dict[str, tuple[Path, ...]] = {}
    for slug, paths in sorted(paths_by_slug.items()):
        if len(paths) <= 1:
            continue
        collisions[slug] = tuple(sorted(paths, key=lambda path: stable_path_key(path, resolved_root)))
        logger.debug("Slug collision for %s: %d files", slug, len(paths))
    return collisions


def stable_path_key(file_path: Path, root: Path) -> str:
    """Return a deterministic path key relative to *root* when possible."""
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()


def _fallback_relative_name(file_path: Path, root: Path) -> str:
    try:
        relative = file_path.relative_to(root)
        return relative.with_suffix("").as_posix().replace("/", "-")
    except ValueError:
        return file_path.stem
