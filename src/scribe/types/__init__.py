"""Shared type aliases for Scribe."""

from .common import GroupBy, ReportStatus, Severity, ToolName
from .config import CommitsConfig, JsDocConfig, ReportConfig

__all__ = [
    "CommitsConfig",
    "GroupBy",
    "JsDocConfig",
    "ReportConfig",
    "ReportStatus",
    "Severity",
    "ToolName",
]
