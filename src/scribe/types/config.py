"""Typed configuration sections for ``scribe.yaml``."""

from __future__ import annotations

from dataclasses import dataclass

from scribe.constants.commits import (
    DEFAULT_COMMIT_TYPES,
    DEFAULT_IGNORE_PATTERNS,
    DEFAULT_MAX_BODY_LINE_LENGTH,
    DEFAULT_MAX_HEADER_LENGTH,
)
from scribe.constants.jsdoc import DEFAULT_JSDOC_EXCLUDE, DEFAULT_JSDOC_INCLUDE
from scribe.constants.reporting import DEFAULT_GROUP_BY, DEFAULT_MAX_PER_GROUP
from scribe.types.common import GroupBy, Severity


@dataclass(frozen=True)
class ReportConfig:
    """Defaults for build-report rendering."""

    group_by: GroupBy = DEFAULT_GROUP_BY  # type: ignore[assignment]
    max_per_group: int = DEFAULT_MAX_PER_GROUP
    min_severity: Severity | None = None


@dataclass(frozen=True)
class CommitsConfig:
    """Conventional Commits lint settings."""

    types: tuple[str, ...] = DEFAULT_COMMIT_TYPES
    scopes: tuple[str, ...] = ()
    require_scope: bool = False
    max_header_length: int = DEFAULT_MAX_HEADER_LENGTH
    max_body_line_length: int = DEFAULT_MAX_BODY_LINE_LENGTH
    ignore_patterns: tuple[str, ...] = DEFAULT_IGNORE_PATTERNS


@dataclass(frozen=True)
class JsDocConfig:
    """JSDoc coverage settings."""

    include: tuple[str, ...] = DEFAULT_JSDOC_INCLUDE
    exclude: tuple[str, ...] = DEFAULT_JSDOC_EXCLUDE
    exported_only: bool = True
    require_returns: bool = True
    require_param_types: bool = True
