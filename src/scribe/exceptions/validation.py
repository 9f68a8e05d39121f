"""Collected ``scribe.yaml`` problems, reported as data rather than raised."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """One config problem with a stable ``CFG`` code and the dotted key it concerns."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""
    line: int | None = None

    @property
    def location(self) -> str:
        return self.path if self.line is None else f"{self.path}:{self.line}"

    def format(self) -> str:
        """``path[:line]: CODE field: message (hint)`` on a single line."""
        subject = f"{self.field}: {self.message}" if self.field else self.message
        text = f"{self.location}: {self.code} {subject}"
        return f"{text} ({self.hint})" if self.hint else text


def sort_errors(errors: Iterable[ValidationError]) -> list[ValidationError]:
    """Order by file, then line, then code and field."""
    return sorted(errors, key=lambda e: (e.path, e.line or 0, e.code, e.field))


def format_errors(errors: Iterable[ValidationError]) -> str:
    return "\n".join(error.format() for error in sort_errors(errors))
