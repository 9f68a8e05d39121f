"""Output writers for build reports and CI threshold evaluation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from scribe.constants.reporting import (
    DEFAULT_GROUP_BY,
    DEFAULT_MAX_PER_GROUP,
    OUTPUT_FORMAT_CSV,
    OUTPUT_FORMAT_JSON,
    OUTPUT_FORMAT_MARKDOWN,
    OUTPUT_FORMAT_SARIF,
    REPORT_JSON_FILENAME,
    REPORT_MARKDOWN_FILENAME,
    REPORT_TEMP_PREFIX,
    REPORT_TEMP_SUFFIX,
    VALID_OUTPUT_FORMATS,
)
from scribe.constants.severity import SEVERITY_RANK
from scribe.exceptions import ConfigError
from scribe.io import write_json_atomic, write_text_atomic
from scribe.model import BuildReport, Diagnostic
from scribe.reporting.csv_writer import write_csv_report
from scribe.reporting.filters import OutputFilters, build_filter_metadata, filter_diagnostics
from scribe.reporting.markdown import render_markdown
from scribe.reporting.sarif_writer import write_sarif_report
from scribe.types import GroupBy, Severity

logger = logging.getLogger(__name__)


def parse_output_formats(value: str) -> tuple[str, ...]:
    """Split a comma-separated ``--output-format`` value, rejecting blanks and unknown names."""
    raw_tokens = value.split(",")
    formats = tuple(token.strip() for token in raw_tokens if token.strip())
    if not formats or len(formats) != len(raw_tokens):
        raise ConfigError("--output-format contains empty or malformed tokens")
    invalid = set(formats) - VALID_OUTPUT_FORMATS
    if invalid:
        raise ConfigError(
            f"unknown output format(s): {', '.join(sorted(invalid))}. "
            f"Valid formats: {', '.join(sorted(VALID_OUTPUT_FORMATS))}"
        )
    return tuple(dict.fromkeys(formats))


def build_report_payload(report: BuildReport, filters: OutputFilters | None = None) -> dict[str, object]:
    """Return the JSON document for *report*, with filter metadata when filters are active."""
    payload: dict[str, object] = report.to_dict()
    if filters is not None:
        shown = filter_diagnostics(report.diagnostics, filters)
        metadata = build_filter_metadata(total=len(report.diagnostics), shown=len(shown), filters=filters)
        if metadata is not None:
            payload["output_filter"] = metadata
    return payload


def write_report_outputs(
    out_dir: Path,
    report: BuildReport,
    formats: Iterable[str],
    *,
    group_by: GroupBy = DEFAULT_GROUP_BY,  # type: ignore[assignment]
    max_per_group: int = DEFAULT_MAX_PER_GROUP,
    min_severity: Severity | None = None,
) -> list[Path]:
    """Write each requested format under *out_dir* and return the written paths."""
    filters = OutputFilters(min_severity=min_severity)
    shown = filter_diagnostics(report.diagnostics, filters)
    written: list[Path] = []

    for fmt in formats:
        if fmt == OUTPUT_FORMAT_JSON:
            path = out_dir / REPORT_JSON_FILENAME
            write_json_atomic(
                path=path,
                payload=build_report_payload(report, filters),
                temp_prefix=REPORT_TEMP_PREFIX,
                temp_suffix=REPORT_TEMP_SUFFIX,
            )
        elif fmt == OUTPUT_FORMAT_MARKDOWN:
            path = out_dir / REPORT_MARKDOWN_FILENAME
            write_text_atomic(
                path=path,
                content=render_markdown(
                    report, group_by=group_by, max_per_group=max_per_group, min_severity=min_severity
                ),
                temp_prefix=".md_tmp_",
                temp_suffix=".md",
            )
        elif fmt == OUTPUT_FORMAT_SARIF:
            metadata = build_filter_metadata(total=len(report.diagnostics), shown=len(shown), filters=filters)
            path = write_sarif_report(out_dir, report, shown, filter_metadata=metadata)
        elif fmt == OUTPUT_FORMAT_CSV:
            path = write_csv_report(out_dir, shown)
        else:
            raise ConfigError(f"unknown output format: {fmt}")
        logger.debug("wrote %s", path)
        written.append(path)

    return written


def evaluate_fail_threshold(diagnostics: Sequence[Diagnostic], fail_on: Severity | None) -> int:
    """Return 1 if any diagnostic is at or above *fail_on*, 0 otherwise."""
    if fail_on is None:
        return 0
    threshold = SEVERITY_RANK.get(fail_on, 0)
    for diagnostic in diagnostics:
        if SEVERITY_RANK.get(diagnostic.severity, 0) >= threshold:
            return 1
    return 0
