"""Tests for JSON Schema validation of report.json."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import jsonschema
import pytest

from scribe.buildlog import build_report
from scribe.constants.reporting import SCHEMA_VERSION
from scribe.model import BuildReport
from scribe.reporting.filters import OutputFilters
from scribe.reporting.writer import build_report_payload, write_report_outputs

SCHEMAS_DIR: Path = Path(__file__).resolve().parents[2] / "schemas"
REPORT_SCHEMA_PATH: Path = SCHEMAS_DIR / "report.schema.json"


@pytest.fixture()
def report_schema() -> dict[str, Any]:
    """Load the report JSON Schema."""
    return json.loads(REPORT_SCHEMA_PATH.read_text(encoding="utf-8"))


def test_schema_version_matches(report_schema: dict[str, Any]) -> None:
    assert report_schema["properties"]["schema_version"]["const"] == SCHEMA_VERSION


@pytest.mark.parametrize(
    "log_name",
    [
        "tsc.log",
        "tsc-pretty.log",
        "eslint-stylish.log",
        "webpack.log",
        "vite-success.log",
        "vite-unresolved.log",
        "vite-esbuild.log",
        "generic.log",
    ],
)
def test_fixture_reports_validate(
    report_schema: dict[str, Any],
    read_log: Callable[[str], str],
    log_name: str,
) -> None:
    payload = build_report_payload(build_report(read_log(log_name)))

    jsonschema.validate(instance=payload, schema=report_schema)


def test_filtered_payload_validates(report_schema: dict[str, Any], sample_report: BuildReport) -> None:
    payload = build_report_payload(sample_report, OutputFilters(min_severity="warning"))

    jsonschema.validate(instance=payload, schema=report_schema)
    assert payload["output_filter"]["shown"] == 3


def test_written_report_validates(report_schema: dict[str, Any], sample_report: BuildReport, tmp_path: Path) -> None:
    (path,) = write_report_outputs(tmp_path, sample_report, ("json",))

    jsonschema.validate(instance=json.loads(path.read_text(encoding="utf-8")), schema=report_schema)


def test_schema_rejects_unknown_keys(report_schema: dict[str, Any], sample_report: BuildReport) -> None:
    payload = build_report_payload(sample_report)
    payload["extra"] = True

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance=payload, schema=report_schema)
