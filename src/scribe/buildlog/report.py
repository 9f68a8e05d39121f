"""Turn raw build output into a :class:`BuildReport`."""

from __future__ import annotations

import logging

from scribe.buildlog.detect import resolve_parser
from scribe.buildlog.grouping import categorize, dedupe_diagnostics
from scribe.constants.reporting import STATUS_FAILED, STATUS_PASSED, STATUS_PASSED_WITH_WARNINGS
from scribe.model import BuildReport, sort_diagnostics
from scribe.types import ReportStatus

logger = logging.getLogger(__name__)


def build_report(text: str, tool: str | None = None) -> BuildReport:
    """Detect the tool (unless *tool* is given), parse *text* and summarise the outcome."""
    parser = resolve_parser(text, tool)
    parsed = parser.parse(text)
    logger.debug("parsed %d lines with %s parser", parsed.line_count, parsed.tool)

    diagnostics = [d.with_category(categorize(d)) for d in dedupe_diagnostics(parsed.diagnostics)]
    errors = sum(1 for d in diagnostics if d.severity == "error")
    warnings = sum(1 for d in diagnostics if d.severity == "warning")

    notes = list(parsed.notes)
    for label, reported, found in (
        ("errors", parsed.reported_errors, errors),
        ("warnings", parsed.reported_warnings, warnings),
    ):
        if reported is not None and reported != found:
            note = f"{parsed.tool} reported {reported} {label} but {found} were parsed"
            logger.warning("%s", note)
            notes.append(note)

    status: ReportStatus
    if errors or parsed.failure_marker or (parsed.reported_errors or 0) > 0:
        status = STATUS_FAILED
    elif warnings or (parsed.reported_warnings or 0) > 0:
        status = STATUS_PASSED_WITH_WARNINGS
    else:
        status = STATUS_PASSED

    return BuildReport(
        tool=parsed.tool,
        status=status,
        diagnostics=tuple(sort_diagnostics(diagnostics)),
        reported_errors=parsed.reported_errors,
        reported_warnings=parsed.reported_warnings,
        duration_seconds=parsed.duration_seconds,
        artifacts=tuple(parsed.artifacts),
        modules_transformed=parsed.modules_transformed,
        warnings=tuple(notes),
        source_lines=parsed.line_count,
    )
