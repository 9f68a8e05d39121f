"""Shared output-filter helpers for reporters and file writers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from scribe.constants.severity import SEVERITY_RANK
from scribe.model import Diagnostic
from scribe.types import Severity


@dataclass(frozen=True)
class OutputFilters:
    """Display/output filters that do not change the parsed report."""

    min_severity: Severity | None = None

    def active(self) -> bool:
        """Whether any filter is enabled."""
        return self.min_severity is not None


def diagnostic_passes_filters(diagnostic: Diagnostic, filters: OutputFilters) -> bool:
    """Return whether a diagnostic should be shown under the configured filters."""
    if filters.min_severity is None:
        return True
    return SEVERITY_RANK.get(diagnostic.severity, 0) >= SEVERITY_RANK[filters.min_severity]


def filter_diagnostics(diagnostics: Sequence[Diagnostic], filters: OutputFilters) -> list[Diagnostic]:
    """Return diagnostics that pass all configured output filters."""
    return [diagnostic for diagnostic in diagnostics if diagnostic_passes_filters(diagnostic, filters)]


def build_filter_metadata(
    *,
    total: int,
    shown: int,
    filters: OutputFilters,
) -> dict[str, object] | None:
    """Build stable filter metadata for JSON/SARIF payloads."""
    if not filters.active():
        return None
    return {
        "min_severity": filters.min_severity,
        "shown": shown,
        "total": total,
        "filtered": max(0, total - shown),
    }
