"""Reporting package for Scribe outputs."""

from __future__ import annotations

from typing import Any

_EXPORTS = {
    "OutputFilters": "filters",
    "StdoutReporter": "stdout",
    "build_report_payload": "writer",
    "build_sarif_envelope": "sarif_writer",
    "evaluate_fail_threshold": "writer",
    "filter_diagnostics": "filters",
    "parse_output_formats": "writer",
    "render_csv_string": "csv_writer",
    "render_diagnostics_text": "stdout",
    "render_markdown": "markdown",
    "write_report_outputs": "writer",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> Any:
    """Lazily expose reporting APIs to avoid import cycles at package import time."""
    if name in _EXPORTS:
        from importlib import import_module

        module = import_module(f"{__name__}.{_EXPORTS[name]}")
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
