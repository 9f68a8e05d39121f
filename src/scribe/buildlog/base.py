"""Parser interface and shared helpers for build-tool output."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar

from scribe.constants.buildlog import ANSI_ESCAPE_PATTERN, BUILD_TOOLS
from scribe.model import Artifact, Diagnostic


@dataclass
class ParsedLog:
    """Mutable accumulator filled by a parser while it walks the log."""

    tool: str
    diagnostics: list[Diagnostic] = field(default_factory=list)
    reported_errors: int | None = None
    reported_warnings: int | None = None
    duration_seconds: float | None = None
    artifacts: list[Artifact] = field(default_factory=list)
    modules_transformed: int | None = None
    failure_marker: bool = False
    notes: list[str] = field(default_factory=list)
    line_count: int = 0


class BuildLogParser(ABC):
    """Abstract base class for build-log parsers."""

    tool: ClassVar[str]

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate parser subclasses declare a known ``tool`` name."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return
        tool = getattr(cls, "tool", None)
        if tool not in BUILD_TOOLS:
            raise TypeError(f"{cls.__name__}.tool must be one of {BUILD_TOOLS} (got {tool!r})")

    @abstractmethod
    def detect(self, text: str) -> int:
        """Return 0-100 confidence that *text* was produced by this tool."""

    @abstractmethod
    def parse_lines(self, lines: list[str], result: ParsedLog) -> None:
        """Populate *result* from the cleaned log lines."""

    def parse(self, text: str) -> ParsedLog:
        """Clean *text* and parse it into a :class:`ParsedLog`."""
        lines = clean_log(text).split("\n")
        result = ParsedLog(tool=self.tool, line_count=len(lines))
        self.parse_lines(lines, result)
        return result


def clean_log(text: str) -> str:
    """Strip ANSI escapes and carriage returns."""
    text = ANSI_ESCAPE_PATTERN.sub("", text)
    return text.replace("\r\n", "\n").replace("\r", "\n")


def to_seconds(value: str, unit: str) -> float:
    amount = float(value)
    return round(amount / 1000.0, 3) if unit == "ms" else round(amount, 3)


def optional_int(value: str | None) -> int | None:
    return int(value) if value else None
