"""Webpack CLI output parser."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from scribe.buildlog.base import BuildLogParser, ParsedLog, optional_int, to_seconds
from scribe.constants.buildlog import (
    CODE_ASSET_SIZE_LIMIT,
    CODE_ENTRYPOINT_SIZE_LIMIT,
    CODE_MODULE_BUILD_FAILED,
    CODE_MODULE_NOT_FOUND,
    DETECT_BUNDLER,
    DETECT_MEDIUM,
    DETECT_WEAK,
    TOOL_WEBPACK,
    WEBPACK_ASSET_PATTERN,
    WEBPACK_BLOCK_HEADER_PATTERN,
    WEBPACK_ERROR_COUNT_PATTERN,
    WEBPACK_MODULE_BUILD_FAILED,
    WEBPACK_MODULE_NOT_FOUND,
    WEBPACK_SUMMARY_PATTERN,
    WEBPACK_TS_MESSAGE_PATTERN,
    WEBPACK_TSL_PATTERN,
    WEBPACK_WARNING_COUNT_PATTERN,
    WEBPACK_WHERE_PATTERN,
)
from scribe.model import Artifact, Diagnostic
from scribe.types import Severity


@dataclass
class _Block:
    severity: Severity
    where: str
    start_line: int
    lines: list[str] = field(default_factory=list)


class WebpackParser(BuildLogParser):
    """Parses ``ERROR in`` / ``WARNING in`` blocks, asset rows and the compile summary."""

    tool = TOOL_WEBPACK

    def detect(self, text: str) -> int:
        lines = text.splitlines()
        if any(WEBPACK_SUMMARY_PATTERN.match(line.strip()) for line in lines):
            return DETECT_BUNDLER
        if any(WEBPACK_BLOCK_HEADER_PATTERN.match(line) for line in lines):
            return DETECT_MEDIUM
        if "webpack" in text.lower() and any(WEBPACK_ASSET_PATTERN.match(line) for line in lines):
            return DETECT_MEDIUM
        if "webpack" in text.lower():
            return DETECT_WEAK
        return 0

    def parse_lines(self, lines: list[str], result: ParsedLog) -> None:
        block: _Block | None = None

        for number, raw in enumerate(lines, start=1):
            line = raw.rstrip()
            stripped = line.strip()

            header = WEBPACK_BLOCK_HEADER_PATTERN.match(line)
            summary = WEBPACK_SUMMARY_PATTERN.match(stripped)
            if header or summary or not stripped:
                if block is not None:
                    result.diagnostics.append(self._finish_block(block))
                    block = None

            if header:
                severity: Severity = "error" if header.group("severity") == "ERROR" else "warning"
                block = _Block(severity=severity, where=header.group("where"), start_line=number)
                continue

            if summary:
                self._apply_summary(summary, stripped, result)
                continue

            if block is not None:
                block.lines.append(stripped)
                continue

            asset = WEBPACK_ASSET_PATTERN.match(stripped)
            if asset:
                result.artifacts.append(Artifact(name=asset.group("name"), size=asset.group("size")))

        if block is not None:
            result.diagnostics.append(self._finish_block(block))

    def _apply_summary(self, summary: re.Match[str], text: str, result: ParsedLog) -> None:
        outcome = summary.group("outcome")
        if outcome == "successfully":
            result.reported_errors = 0
            result.reported_warnings = 0
        else:
            errors = WEBPACK_ERROR_COUNT_PATTERN.search(outcome)
            warnings = WEBPACK_WARNING_COUNT_PATTERN.search(outcome)
            result.reported_errors = int(errors.group("count")) if errors else 0
            result.reported_warnings = int(warnings.group("count")) if warnings else 0
            if result.reported_errors:
                result.failure_marker = True
        if summary.group("duration"):
            result.duration_seconds = to_seconds(summary.group("duration"), summary.group("unit"))

    def _finish_block(self, block: _Block) -> Diagnostic:
        file, line, column = _parse_where(block.where)
        code: str | None = None
        message: str | None = None

        content: list[str] = []
        for text in block.lines:
            tsl = WEBPACK_TSL_PATTERN.match(text)
            if tsl:
                file = tsl.group("file").strip()
                line = int(tsl.group("line"))
                column = int(tsl.group("column"))
                continue
            ts_message = WEBPACK_TS_MESSAGE_PATTERN.match(text)
            if ts_message and code is None:
                code = ts_message.group("code")
                message = ts_message.group("message").strip()
                continue
            if _is_location_only(text):
                continue
            content.append(text)

        if message is None:
            if file is None and ":" in block.where:
                message = block.where
            elif file is None and content:
                message = f"{block.where}: {content[0]}"
            elif content:
                message = content[0]
                if message.endswith(":") and len(content) > 1:
                    message = f"{message} {content[1]}"
            else:
                message = block.where if file is None else f"{block.severity} in {block.where}"

        if code is None:
            code = _code_for(block.where, message)

        return Diagnostic(
            tool=self.tool,
            severity=block.severity,
            message=message,
            file=file,
            line=line,
            column=column,
            code=code,
            source_line=block.start_line,
        )


def _parse_where(where: str) -> tuple[str | None, int | None, int | None]:
    """Split a block header location into file, line and column."""
    match = WEBPACK_WHERE_PATTERN.match(where.strip())
    if not match:
        return None, None, None
    line = match.group("line") or match.group("range_line") or match.group("paren_line")
    column = match.group("column") or match.group("range_column") or match.group("paren_column")
    return match.group("file"), optional_int(line), optional_int(column)


def _is_location_only(text: str) -> bool:
    match = WEBPACK_WHERE_PATTERN.match(text)
    if not match:
        return False
    return bool(match.group("line") or match.group("range_line") or match.group("paren_line"))


def _code_for(where: str, message: str) -> str | None:
    lowered = where.lower()
    if lowered.startswith("asset size limit"):
        return CODE_ASSET_SIZE_LIMIT
    if lowered.startswith("entrypoint size limit"):
        return CODE_ENTRYPOINT_SIZE_LIMIT
    if message.startswith(WEBPACK_MODULE_NOT_FOUND):
        return CODE_MODULE_NOT_FOUND
    if message.startswith(WEBPACK_MODULE_BUILD_FAILED):
        return CODE_MODULE_BUILD_FAILED
    return None
