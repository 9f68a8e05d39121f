"""GitHub-flavoured Markdown rendering of a build report."""

from __future__ import annotations

from scribe.buildlog.grouping import group_diagnostics, root_causes
from scribe.constants.buildlog import CATEGORY_LABELS
from scribe.constants.reporting import DEFAULT_GROUP_BY, DEFAULT_MAX_PER_GROUP, STATUS_EMOJI, STATUS_HEADLINES
from scribe.model import BuildReport, Diagnostic
from scribe.reporting.filters import OutputFilters, filter_diagnostics
from scribe.types import GroupBy, Severity


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


def _diagnostic_line(diagnostic: Diagnostic) -> str:
    code = f" {diagnostic.code}" if diagnostic.code else ""
    message = diagnostic.message.replace("\n", "\n    ")
    return f"{diagnostic.location}: {diagnostic.severity}{code} {message}"


def render_markdown(
    report: BuildReport,
    *,
    group_by: GroupBy = DEFAULT_GROUP_BY,  # type: ignore[assignment]
    max_per_group: int = DEFAULT_MAX_PER_GROUP,
    min_severity: Severity | None = None,
) -> str:
    """Render *report* as Markdown suitable for a PR comment or job summary."""
    shown = filter_diagnostics(report.diagnostics, OutputFilters(min_severity=min_severity))
    counts = report.counts_by_severity

    lines = [f"## {STATUS_EMOJI[report.status]} {STATUS_HEADLINES[report.status]} ({report.tool})", ""]
    lines += [
        "| Metric | Value |",
        "| --- | --- |",
        f"| Errors | {counts.get('error', 0)} |",
        f"| Warnings | {counts.get('warning', 0)} |",
        f"| Info | {counts.get('info', 0)} |",
    ]
    if report.reported_errors is not None or report.reported_warnings is not None:
        lines.append(
            f"| Reported by {report.tool} | {report.reported_errors or 0} errors, "
            f"{report.reported_warnings or 0} warnings |"
        )
    if report.modules_transformed is not None:
        lines.append(f"| Modules transformed | {report.modules_transformed} |")
    if report.duration_seconds is not None:
        lines.append(f"| Duration | {report.duration_seconds:.2f}s |")
    lines.append("")

    for note in report.warnings:
        lines.append(f"> **Note:** {note}")
    if report.warnings:
        lines.append("")

    causes = root_causes(shown)
    if causes:
        lines += ["### Likely root causes", ""]
        for cause in causes:
            label = CATEGORY_LABELS.get(cause.category, cause.category)
            example = cause.example
            code = f"`{example.code}` " if example.code else ""
            first_line = example.message.split("\n", 1)[0]
            lines.append(f"- **{label}** ({cause.count}): {code}{first_line} at `{example.location}`")
        lines.append("")

    if shown:
        title = "Diagnostics" if group_by == "none" else f"Diagnostics by {group_by}"
        lines += [f"### {title}", ""]
        for group in group_diagnostics(shown, group_by):
            lines.append(f"#### `{group.key}` ({group.error_count} errors, {group.warning_count} warnings)")
            lines.append("")
            lines.append("```text")
            lines += [_diagnostic_line(d) for d in group.diagnostics[:max_per_group]]
            lines.append("```")
            hidden = len(group) - max_per_group
            if hidden > 0:
                lines.append(f"_… and {hidden} more_")
            lines.append("")

    if report.artifacts:
        lines += ["### Artifacts", "", "| File | Size | Gzip |", "| --- | --- | --- |"]
        for artifact in report.artifacts:
            lines.append(f"| `{_escape_cell(artifact.name)}` | {artifact.size} | {artifact.gzip_size or '-'} |")
        lines.append("")

    return "\n".join(lines).rstrip("\n") + "\n"
