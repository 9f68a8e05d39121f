"""CSV export writer for report diagnostics."""

from __future__ import annotations

import csv
import io
from collections.abc import Sequence
from pathlib import Path

from scribe.constants.reporting import CSV_COLUMNS, REPORT_CSV_FILENAME
from scribe.io import write_text_atomic
from scribe.model import Diagnostic, sort_diagnostics


def write_csv_report(out_root: Path, diagnostics: Sequence[Diagnostic]) -> Path:
    """Write report.csv under the output root and return the path."""
    csv_path = out_root / REPORT_CSV_FILENAME
    write_text_atomic(
        path=csv_path,
        content=render_csv_string(diagnostics),
        temp_prefix=".csv_tmp_",
        temp_suffix=".csv",
    )
    return csv_path


def render_csv_string(diagnostics: Sequence[Diagnostic]) -> str:
    """Render diagnostics as a CSV string (useful for testing)."""
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(CSV_COLUMNS)
    for d in sort_diagnostics(diagnostics):
        writer.writerow(
            (
                d.tool,
                d.severity,
                d.code or "",
                d.category,
                d.file or "",
                d.line if d.line is not None else "",
                d.column if d.column is not None else "",
                d.message,
            )
        )
    return buf.getvalue()
