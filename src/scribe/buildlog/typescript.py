"""TypeScript compiler (``tsc``) output parser."""

from __future__ import annotations

from dataclasses import replace

from scribe.buildlog.base import BuildLogParser, ParsedLog
from scribe.constants.buildlog import (
    DETECT_MEDIUM,
    DETECT_STRONG,
    TOOL_TSC,
    TSC_CODE_FRAME_PATTERN,
    TSC_CODE_PATTERN,
    TSC_CONTINUATION_PATTERN,
    TSC_GLOBAL_PATTERN,
    TSC_PLAIN_PATTERN,
    TSC_PRETTY_PATTERN,
    TSC_SUMMARY_PATTERN,
    TSC_UNDERLINE_PATTERN,
    TSC_WATCH_CYCLE_PATTERN,
    TSC_WATCH_PREFIX_PATTERN,
)
from scribe.model import Diagnostic
from scribe.types import Severity

_SEVERITY_MAP: dict[str, Severity] = {"error": "error", "warning": "warning", "message": "info"}


class TypeScriptParser(BuildLogParser):
    """Parses plain and ``--pretty`` tsc diagnostics, message chains and summaries."""

    tool = TOOL_TSC

    def detect(self, text: str) -> int:
        lines = text.splitlines()
        if any(TSC_PLAIN_PATTERN.match(line) or TSC_PRETTY_PATTERN.match(line) for line in lines):
            return DETECT_STRONG
        if any(TSC_GLOBAL_PATTERN.match(line) for line in lines):
            return DETECT_MEDIUM
        if TSC_SUMMARY_PATTERN.search(text) and TSC_CODE_PATTERN.search(text):
            return DETECT_MEDIUM
        return 0

    def parse_lines(self, lines: list[str], result: ParsedLog) -> None:
        current: int | None = None

        for number, raw in enumerate(lines, start=1):
            line = TSC_WATCH_PREFIX_PATTERN.sub("", raw.rstrip())
            if TSC_WATCH_CYCLE_PATTERN.search(line):
                # a new watch cycle supersedes everything reported so far
                result.diagnostics.clear()
                result.reported_errors = None
                current = None
                continue
            if not line.strip():
                current = None
                continue

            match = TSC_PLAIN_PATTERN.match(line) or TSC_PRETTY_PATTERN.match(line)
            if match:
                result.diagnostics.append(
                    Diagnostic(
                        tool=self.tool,
                        severity=_SEVERITY_MAP[match.group("severity")],
                        message=match.group("message").strip(),
                        file=match.group("file").strip(),
                        line=int(match.group("line")),
                        column=int(match.group("column")),
                        code=match.group("code"),
                        source_line=number,
                    )
                )
                current = len(result.diagnostics) - 1
                continue

            match = TSC_GLOBAL_PATTERN.match(line)
            if match:
                result.diagnostics.append(
                    Diagnostic(
                        tool=self.tool,
                        severity=_SEVERITY_MAP[match.group("severity")],
                        message=match.group("message").strip(),
                        code=match.group("code"),
                        source_line=number,
                    )
                )
                current = len(result.diagnostics) - 1
                continue

            summary = TSC_SUMMARY_PATTERN.search(line)
            if summary:
                result.reported_errors = int(summary.group("count"))
                current = None
                continue

            if TSC_UNDERLINE_PATTERN.match(line) or TSC_CODE_FRAME_PATTERN.match(line):
                continue

            if current is not None and TSC_CONTINUATION_PATTERN.match(line):
                previous = result.diagnostics[current]
                result.diagnostics[current] = replace(previous, message=f"{previous.message}\n{line.strip()}")

