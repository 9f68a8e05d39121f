"""Human-readable stdout reporter for build reports and lint diagnostics."""

from __future__ import annotations

from collections.abc import Sequence

from scribe.buildlog.grouping import group_diagnostics, root_causes
from scribe.constants.branding import ASCII_LOGO_LINES, REPORT_SUMMARY_TITLE
from scribe.constants.buildlog import CATEGORY_LABELS
from scribe.constants.reporting import (
    ANSI_BOLD,
    ANSI_RESET,
    DEFAULT_GROUP_BY,
    DEFAULT_MAX_PER_GROUP,
    SEVERITY_COLORS,
    STATUS_COLORS,
    TOP_FILES_LIMIT,
)
from scribe.model import BuildReport, Diagnostic
from scribe.reporting.filters import OutputFilters, filter_diagnostics
from scribe.types import GroupBy, Severity


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _color_severity(severity: str, *, color: bool) -> str:
    code = SEVERITY_COLORS.get(severity, "")
    return _colorize(severity, code) if color and code else severity


def _format_counts(counts: dict[str, int], limit: int) -> str:
    """Render top-N ``key count`` pairs sorted by descending count, then key."""
    if not counts:
        return "none"
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    head = ranked[:limit]
    parts = [f"{key} {count}" for key, count in head]
    remaining = len(ranked) - len(head)
    if remaining > 0:
        parts.append(f"(+{remaining} more)")
    return " · ".join(parts)


class StdoutReporter:
    """Formats a :class:`BuildReport` as a terminal summary plus grouped diagnostics."""

    def __init__(
        self,
        report: BuildReport,
        *,
        color: bool = True,
        verbose: bool = False,
        group_by: GroupBy = DEFAULT_GROUP_BY,  # type: ignore[assignment]
        max_per_group: int = DEFAULT_MAX_PER_GROUP,
        min_severity: Severity | None = None,
        summary_only: bool = False,
    ) -> None:
        self._report = report
        self._color = color
        self._verbose = verbose
        self._group_by = group_by
        self._max_per_group = max_per_group
        self._summary_only = summary_only
        self._filters = OutputFilters(min_severity=min_severity)
        self._shown = filter_diagnostics(report.diagnostics, self._filters)

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header()]
        if not self._summary_only:
            sections.append(self._render_groups())
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        r = self._report
        sep = "  " + "─" * 38
        status = _colorize(r.status, STATUS_COLORS[r.status]) if self._color else r.status

        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {REPORT_SUMMARY_TITLE}",
            sep,
            "",
            f"  Tool        {r.tool}",
            f"  Status      {status}",
        ]

        total = len(r.diagnostics)
        if self._filters.active():
            hidden = total - len(self._shown)
            lines.append(
                f"  Diagnostics {len(self._shown)} shown / {total} total "
                f"({hidden} below {self._filters.min_severity} filtered)"
            )
        else:
            lines.append(f"  Diagnostics {total}")

        severity_parts = []
        for severity in ("error", "warning", "info"):
            count = r.counts_by_severity.get(severity, 0)
            severity_parts.append(f"{count} {_color_severity(severity, color=self._color)}")
        lines.append(f"  Severities  {' · '.join(severity_parts)}")

        if r.diagnostics:
            lines.append(f"  Top files   {_format_counts(r.counts_by_file, TOP_FILES_LIMIT)}")
            causes = root_causes(r.diagnostics)
            if causes:
                rendered = " · ".join(f"{CATEGORY_LABELS.get(c.category, c.category)} {c.count}" for c in causes)
                lines.append(f"  Root causes {rendered}")

        if r.reported_errors is not None or r.reported_warnings is not None:
            lines.append(f"  Reported    {r.reported_errors or 0} errors / {r.reported_warnings or 0} warnings")
        if r.modules_transformed is not None:
            lines.append(f"  Modules     {r.modules_transformed} transformed")
        if r.duration_seconds is not None:
            lines.append(f"  Duration    {r.duration_seconds:.3f}s")
        if self._verbose:
            lines.append(f"  Log lines   {r.source_lines}")
            for artifact in r.artifacts:
                gzip = f" (gzip {artifact.gzip_size})" if artifact.gzip_size else ""
                lines.append(f"  Artifact    {artifact.name} {artifact.size}{gzip}")
        for note in r.warnings:
            lines.append(f"  Note        {note}")
        lines.append("")
        return "\n".join(lines)

    def _render_groups(self) -> str:
        if not self._shown:
            return ""

        title = "Diagnostics" if self._group_by == "none" else f"Diagnostics (grouped by {self._group_by})"
        lines = [f"  {title}", ""]
        for group in group_diagnostics(self._shown, self._group_by):
            heading = f"[{group.key}]"
            if self._color:
                heading = _colorize(heading, ANSI_BOLD)
            lines.append(
                f"  {heading}  errors={group.error_count}  warnings={group.warning_count}  diagnostics={len(group)}"
            )
            for diagnostic in group.diagnostics[: self._max_per_group]:
                lines.append(self._render_row(diagnostic))
            hidden = len(group) - self._max_per_group
            if hidden > 0:
                lines.append(f"    … and {hidden} more")
            lines.append("")
        return "\n".join(lines)

    def _render_row(self, diagnostic: Diagnostic) -> str:
        severity = _color_severity(diagnostic.severity, color=self._color)
        padding = " " * max(0, 8 - len(diagnostic.severity))
        if self._group_by == "file" and diagnostic.file:
            where = diagnostic.location[len(diagnostic.file) + 1 :] or "-"
        else:
            where = diagnostic.location
        message = diagnostic.message if self._verbose else diagnostic.message.split("\n", 1)[0]
        message = message.replace("\n", "\n      ")
        code = f"  {diagnostic.code}" if diagnostic.code else ""
        return f"    {severity}{padding} {where}{code}  {message}"


def render_diagnostics_text(diagnostics: Sequence[Diagnostic], *, color: bool = False) -> str:
    """One ``location: severity CODE message`` line per diagnostic."""
    lines = []
    for d in diagnostics:
        code = f" {d.code}" if d.code else ""
        first_line = d.message.split("\n", 1)[0]
        lines.append(f"{d.location}: {_color_severity(d.severity, color=color)}{code} {first_line}")
    return "\n".join(lines)
