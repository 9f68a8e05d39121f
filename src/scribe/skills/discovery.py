"""Skill file discovery and naming helpers."""

from __future__ import annotations

import logging
from pathlib import Path

from scribe.constants.discovery import SKILL_MARKDOWN_FILENAME, SKILL_NAME_FALLBACK
from scribe.constants.naming import COLLAPSE_DASH_PATTERN, NON_OUTPUT_NAME_PATTERN

logger = logging.getLogger(__name__)


def discover_skill_files(root: Path, skill_globs: tuple[str, ...], max_file_mb: int) -> list[Path]:
    """Discover SKILL.md files by configured glob patterns."""
    discovered: set[Path] = set()
    size_limit_bytes = max_file_mb * 1024 * 1024
    resolved_root = root.resolve()

    for pattern in skill_globs:
        for path in resolved_root.glob(pattern):
            if not path.is_file() or path.name != SKILL_MARKDOWN_FILENAME:
                continue
            try:
                size = path.stat().st_size
            except OSError as exc:
                logger.warning("Skipping unreadable skill file %s: %s", path, exc)
                continue
            if size > size_limit_bytes:
                logger.info("Skipping %s: larger than %d MB", path, max_file_mb)
                continue
            discovered.add(path.resolve())

    return sorted(discovered, key=lambda path: stable_path_key(path, resolved_root))


def derive_skill_name(file_path: Path, root: Path, *, declared_name: str | None = None) -> str:
    """Derive a stable lookup name for a discovered SKILL.md file.

    Precedence: the frontmatter ``name``, then the enclosing folder, then the
    root-relative path with separators turned into dashes.
    """
    if declared_name:
        return sanitize_skill_name(declared_name)

    root = root.resolve()
    file_path = file_path.resolve()
    if file_path.name == SKILL_MARKDOWN_FILENAME and file_path.parent != root:
        return sanitize_skill_name(file_path.parent.name)

    return sanitize_skill_name(_fallback_relative_name(file_path, root))


def sanitize_skill_name(raw_name: str) -> str:
    """Lowercase and reduce a name to ``[a-z0-9._-]`` with single dashes."""
    normalized = raw_name.strip().lower()
    normalized = NON_OUTPUT_NAME_PATTERN.sub("-", normalized)
    normalized = COLLAPSE_DASH_PATTERN.sub("-", normalized)
    normalized = normalized.strip("-._")
    return normalized or SKILL_NAME_FALLBACK


def stable_path_key(file_path: Path, root: Path) -> str:
    """Return a deterministic path key relative to *root* when possible."""
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()


def _fallback_relative_name(file_path: Path, root: Path) -> str:
    try:
        relative = file_path.relative_to(root)
    except ValueError:
        return file_path.stem
    return relative.with_suffix("").as_posix().replace("/", "-")
