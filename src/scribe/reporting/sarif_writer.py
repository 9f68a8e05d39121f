"""SARIF 2.1.0 export writer for report diagnostics."""

from __future__ import annotations

import json
from collections import Counter
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from scribe import __version__
from scribe.constants.reporting import (
    REPORT_SARIF_FILENAME,
    SARIF_SCHEMA_URI,
    SARIF_SEVERITY_MAP,
    SARIF_TOOL_NAME,
    SARIF_VERSION,
)
from scribe.io import write_text_atomic
from scribe.model import BuildReport, Diagnostic, sort_diagnostics


def _rule_id(diagnostic: Diagnostic) -> str:
    return diagnostic.code or f"{diagnostic.tool}/{diagnostic.category}"


def _build_sarif_result(diagnostic: Diagnostic) -> dict[str, Any]:
    """Map a single Diagnostic to a SARIF result object."""
    result: dict[str, Any] = {
        "ruleId": _rule_id(diagnostic),
        "level": SARIF_SEVERITY_MAP.get(diagnostic.severity, "note"),
        "message": {"text": diagnostic.message},
        "properties": {
            "tool": diagnostic.tool,
            "category": diagnostic.category,
        },
    }
    if diagnostic.file:
        location: dict[str, Any] = {"artifactLocation": {"uri": diagnostic.file}}
        if diagnostic.line is not None:
            region: dict[str, int] = {"startLine": diagnostic.line}
            # SARIF columns are 1-based
            if diagnostic.column is not None and diagnostic.column > 0:
                region["startColumn"] = diagnostic.column
            location["region"] = region
        result["locations"] = [{"physicalLocation": location}]
    return result


def _build_sarif_rules(diagnostics: Sequence[Diagnostic]) -> list[dict[str, Any]]:
    """Derive minimal SARIF rule descriptors from observed codes."""
    seen: dict[str, Diagnostic] = {}
    for d in diagnostics:
        seen.setdefault(_rule_id(d), d)
    return [
        {"id": rule_id, "shortDescription": {"text": seen[rule_id].category}, "properties": {"tool": seen[rule_id].tool}}
        for rule_id in sorted(seen)
    ]


def build_sarif_envelope(
    report: BuildReport,
    diagnostics: Sequence[Diagnostic] | None = None,
    *,
    filter_metadata: dict[str, object] | None = None,
) -> dict[str, Any]:
    """Build a complete SARIF 2.1.0 document for *report*."""
    shown = sort_diagnostics(diagnostics if diagnostics is not None else report.diagnostics)
    run_properties: dict[str, object] = {
        "buildTool": report.tool,
        "status": report.status,
        "categoryDistribution": dict(sorted(Counter(d.category for d in shown).items())),
    }
    if filter_metadata is not None:
        run_properties["filter"] = filter_metadata

    return {
        "$schema": SARIF_SCHEMA_URI,
        "version": SARIF_VERSION,
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": SARIF_TOOL_NAME,
                        "version": __version__,
                        "rules": _build_sarif_rules(shown),
                    },
                },
                "results": [_build_sarif_result(d) for d in shown],
                "properties": run_properties,
            }
        ],
    }


def write_sarif_report(
    out_root: Path,
    report: BuildReport,
    diagnostics: Sequence[Diagnostic] | None = None,
    *,
    filter_metadata: dict[str, object] | None = None,
) -> Path:
    """Write report.sarif under the output root and return the path."""
    sarif_path = out_root / REPORT_SARIF_FILENAME
    envelope = build_sarif_envelope(report, diagnostics, filter_metadata=filter_metadata)
    write_text_atomic(
        path=sarif_path,
        content=json.dumps(envelope, indent=2) + "\n",
        temp_prefix=".sarif_tmp_",
        temp_suffix=".sarif",
    )
    return sarif_path
