"""Build-log parsing: tool detection, diagnostics and report assembly."""

from .base import BuildLogParser, ParsedLog, clean_log
from .detect import PARSERS, detect_tool, get_parser
from .grouping import categorize, dedupe_diagnostics, group_diagnostics, root_causes
from .report import build_report

__all__ = [
    "PARSERS",
    "BuildLogParser",
    "ParsedLog",
    "build_report",
    "categorize",
    "clean_log",
    "dedupe_diagnostics",
    "detect_tool",
    "get_parser",
    "group_diagnostics",
    "root_causes",
]
