"""Constants for report file names, atomic writing, and stdout formatting."""

from __future__ import annotations

REPORT_JSON_FILENAME: str = "report.json"
REPORT_MARKDOWN_FILENAME: str = "report.md"
REPORT_CSV_FILENAME: str = "report.csv"
REPORT_SARIF_FILENAME: str = "report.sarif"
REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

SCHEMA_VERSION: str = "1.0.0"

OUTPUT_FORMAT_JSON: str = "json"
OUTPUT_FORMAT_MARKDOWN: str = "markdown"
OUTPUT_FORMAT_SARIF: str = "sarif"
OUTPUT_FORMAT_CSV: str = "csv"
VALID_OUTPUT_FORMATS: frozenset[str] = frozenset(
    {OUTPUT_FORMAT_JSON, OUTPUT_FORMAT_MARKDOWN, OUTPUT_FORMAT_SARIF, OUTPUT_FORMAT_CSV}
)
DEFAULT_OUTPUT_FORMAT: str = OUTPUT_FORMAT_JSON

STDOUT_FORMAT_TEXT: str = "text"
STDOUT_FORMAT_MARKDOWN: str = "markdown"
VALID_STDOUT_FORMATS: tuple[str, ...] = (STDOUT_FORMAT_TEXT, STDOUT_FORMAT_MARKDOWN)

VALID_GROUP_BY: tuple[str, ...] = ("file", "code", "category", "severity", "none")
DEFAULT_GROUP_BY: str = "file"
DEFAULT_MAX_PER_GROUP: int = 20
TOP_FILES_LIMIT: int = 3
GLOBAL_LOCATION: str = "<global>"
UNGROUPED_KEY: str = "all"

CSV_COLUMNS: tuple[str, ...] = (
    "tool",
    "severity",
    "code",
    "category",
    "file",
    "line",
    "column",
    "message",
)

SARIF_VERSION: str = "2.1.0"
SARIF_SCHEMA_URI: str = "https://docs.oasis-open.org/sarif/sarif/v2.1.0/cos02/schemas/sarif-schema-2.1.0.json"
SARIF_TOOL_NAME: str = "SCRIBE"

SARIF_SEVERITY_MAP: dict[str, str] = {
    "error": "error",
    "warning": "warning",
    "info": "note",
}

STATUS_PASSED: str = "passed"
STATUS_PASSED_WITH_WARNINGS: str = "passed_with_warnings"
STATUS_FAILED: str = "failed"

STATUS_EMOJI: dict[str, str] = {
    STATUS_PASSED: "✅",
    STATUS_PASSED_WITH_WARNINGS: "⚠️",
    STATUS_FAILED: "❌",
}
STATUS_HEADLINES: dict[str, str] = {
    STATUS_PASSED: "Build passed",
    STATUS_PASSED_WITH_WARNINGS: "Build passed with warnings",
    STATUS_FAILED: "Build failed",
}

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"

SEVERITY_COLORS: dict[str, str] = {
    "error": ANSI_RED,
    "warning": ANSI_YELLOW,
    "info": ANSI_DIM,
}
STATUS_COLORS: dict[str, str] = {
    STATUS_PASSED: ANSI_GREEN,
    STATUS_PASSED_WITH_WARNINGS: ANSI_YELLOW,
    STATUS_FAILED: ANSI_RED,
}
