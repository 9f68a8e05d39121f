"""Deduplication, root-cause categorisation and grouping of diagnostics."""

from __future__ import annotations

from collections.abc import Iterable

from scribe.constants.buildlog import (
    CATEGORY_BY_CODE,
    CATEGORY_BY_MESSAGE,
    CATEGORY_OTHER,
    CATEGORY_STYLE,
    ROOT_CAUSES_DEFAULT_LIMIT,
    TOOL_ESLINT,
)
from scribe.constants.reporting import GLOBAL_LOCATION, UNGROUPED_KEY, VALID_GROUP_BY
from scribe.model import Diagnostic, DiagnosticGroup, RootCause, sort_diagnostics
from scribe.types import GroupBy


def dedupe_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Keep the first occurrence of each diagnostic identity, preserving order."""
    seen: set[tuple[str, int, int, str, str]] = set()
    unique: list[Diagnostic] = []
    for diagnostic in diagnostics:
        key = diagnostic.key()
        if key in seen:
            continue
        seen.add(key)
        unique.append(diagnostic)
    return unique


def categorize(diagnostic: Diagnostic) -> str:
    """Map a diagnostic to its root-cause category."""
    if diagnostic.code and diagnostic.code in CATEGORY_BY_CODE:
        return CATEGORY_BY_CODE[diagnostic.code]
    for pattern, category in CATEGORY_BY_MESSAGE:
        if pattern.search(diagnostic.message):
            return category
    if diagnostic.tool == TOOL_ESLINT and diagnostic.code:
        return CATEGORY_STYLE
    return CATEGORY_OTHER


def _group_key(diagnostic: Diagnostic, by: GroupBy) -> str:
    if by == "file":
        return diagnostic.file or GLOBAL_LOCATION
    if by == "code":
        return diagnostic.code or "(none)"
    if by == "category":
        return diagnostic.category
    if by == "severity":
        return diagnostic.severity
    return UNGROUPED_KEY


def group_diagnostics(diagnostics: Iterable[Diagnostic], by: GroupBy = "file") -> list[DiagnosticGroup]:
    """Bucket diagnostics by *by*; busiest and most severe groups come first."""
    if by not in VALID_GROUP_BY:
        raise ValueError(f"group_by must be one of {sorted(VALID_GROUP_BY)} (got {by!r})")

    buckets: dict[str, list[Diagnostic]] = {}
    for diagnostic in diagnostics:
        buckets.setdefault(_group_key(diagnostic, by), []).append(diagnostic)

    groups = [DiagnosticGroup(key=key, diagnostics=tuple(sort_diagnostics(items))) for key, items in buckets.items()]
    groups.sort(key=lambda group: (-group.error_count, -len(group), group.key))
    return groups


def root_causes(diagnostics: Iterable[Diagnostic], limit: int = ROOT_CAUSES_DEFAULT_LIMIT) -> list[RootCause]:
    """Return the most frequent categories with a representative diagnostic each."""
    ordered = sort_diagnostics(list(diagnostics))
    counts: dict[str, int] = {}
    examples: dict[str, Diagnostic] = {}
    for diagnostic in ordered:
        counts[diagnostic.category] = counts.get(diagnostic.category, 0) + 1
        examples.setdefault(diagnostic.category, diagnostic)

    if len(counts) > 1:
        counts.pop(CATEGORY_OTHER, None)

    ranked = sorted(counts.items(), key=lambda item: (-examples[item[0]].rank, -item[1], item[0]))
    return [RootCause(category=category, count=count, example=examples[category]) for category, count in ranked[:limit]]
