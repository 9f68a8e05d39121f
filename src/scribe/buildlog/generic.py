"""GCC-style ``path:line:col: severity: message`` fallback parser."""

from __future__ import annotations

from scribe.buildlog.base import BuildLogParser, ParsedLog, optional_int
from scribe.constants.buildlog import DETECT_FALLBACK, GENERIC_DIAGNOSTIC_PATTERN, TOOL_GENERIC
from scribe.model import Diagnostic
from scribe.types import Severity


def _severity(word: str) -> Severity:
    word = word.lower()
    if word in {"error", "fatal error"}:
        return "error"
    if word == "warning":
        return "warning"
    return "info"


class GenericParser(BuildLogParser):
    """Last-resort parser used when no specific tool is recognised."""

    tool = TOOL_GENERIC

    def detect(self, text: str) -> int:
        return DETECT_FALLBACK

    def parse_lines(self, lines: list[str], result: ParsedLog) -> None:
        for number, raw in enumerate(lines, start=1):
            match = GENERIC_DIAGNOSTIC_PATTERN.match(raw.strip())
            if not match:
                continue
            result.diagnostics.append(
                Diagnostic(
                    tool=self.tool,
                    severity=_severity(match.group("severity")),
                    message=match.group("message").strip(),
                    file=match.group("file"),
                    line=int(match.group("line")),
                    column=optional_int(match.group("column")),
                    source_line=number,
                )
            )
