"""ESLint output parser (stylish, unix and compact formatters)."""

from __future__ import annotations

from scribe.buildlog.base import BuildLogParser, ParsedLog
from scribe.constants.buildlog import (
    DETECT_MEDIUM,
    DETECT_STRONG,
    ESLINT_COMPACT_PATTERN,
    ESLINT_FILE_HEADER_PATTERN,
    ESLINT_FIXABLE_PATTERN,
    ESLINT_PLAIN_SUMMARY_PATTERN,
    ESLINT_ROW_PATTERN,
    ESLINT_SUMMARY_PATTERN,
    ESLINT_UNIX_PATTERN,
    TOOL_ESLINT,
)
from scribe.model import Diagnostic
from scribe.types import Severity


def _severity(word: str) -> Severity:
    return "error" if word.lower() == "error" else "warning"


class EslintParser(BuildLogParser):
    """Parses the three line-oriented ESLint formatters into diagnostics."""

    tool = TOOL_ESLINT

    def detect(self, text: str) -> int:
        lines = text.splitlines()
        if any(ESLINT_SUMMARY_PATTERN.match(line.strip()) for line in lines):
            return DETECT_STRONG
        if any(ESLINT_UNIX_PATTERN.match(line) or ESLINT_COMPACT_PATTERN.match(line) for line in lines):
            return DETECT_STRONG
        rows = sum(1 for line in lines if ESLINT_ROW_PATTERN.match(line))
        if rows:
            return DETECT_MEDIUM
        return 0

    def parse_lines(self, lines: list[str], result: ParsedLog) -> None:
        current_file: str | None = None

        for number, raw in enumerate(lines, start=1):
            line = raw.rstrip()
            if not line.strip():
                continue

            match = ESLINT_ROW_PATTERN.match(line)
            if match:
                result.diagnostics.append(
                    Diagnostic(
                        tool=self.tool,
                        severity=_severity(match.group("severity")),
                        message=match.group("message").strip(),
                        file=current_file,
                        line=int(match.group("line")),
                        column=int(match.group("column")),
                        code=match.group("rule"),
                        source_line=number,
                    )
                )
                continue

            stripped = line.strip()
            summary = ESLINT_SUMMARY_PATTERN.match(stripped)
            if summary:
                result.reported_errors = int(summary.group("errors"))
                result.reported_warnings = int(summary.group("warnings"))
                current_file = None
                continue

            if ESLINT_FIXABLE_PATTERN.match(stripped):
                result.notes.append(stripped)
                continue

            plain_summary = ESLINT_PLAIN_SUMMARY_PATTERN.match(stripped)
            if plain_summary:
                current_file = None
                continue

            match = ESLINT_UNIX_PATTERN.match(line) or ESLINT_COMPACT_PATTERN.match(line)
            if match:
                result.diagnostics.append(
                    Diagnostic(
                        tool=self.tool,
                        severity=_severity(match.group("severity")),
                        message=match.group("message").strip(),
                        file=match.group("file").strip(),
                        line=int(match.group("line")),
                        column=int(match.group("column")),
                        code=match.group("rule"),
                        source_line=number,
                    )
                )
                continue

            header = ESLINT_FILE_HEADER_PATTERN.match(line)
            if header:
                current_file = header.group("file").strip()
