"""Frozen data models shared by parsers, checkers and reporters."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from scribe.constants.buildlog import CATEGORY_OTHER
from scribe.constants.commits import BREAKING_CHANGE_TOKENS
from scribe.constants.reporting import GLOBAL_LOCATION, SCHEMA_VERSION
from scribe.constants.severity import SEVERITY_RANK
from scribe.exceptions import SkillParseError
from scribe.types import ReportStatus, Severity, ToolName


@dataclass(frozen=True)
class Diagnostic:
    """A single problem reported by a build tool or a Scribe checker."""

    tool: ToolName
    severity: Severity
    message: str
    file: str | None = None
    line: int | None = None
    column: int | None = None
    code: str | None = None
    category: str = CATEGORY_OTHER
    source_line: int | None = None

    @property
    def rank(self) -> int:
        return SEVERITY_RANK.get(self.severity, 0)

    @property
    def location(self) -> str:
        """Render ``file:line:col`` with missing parts omitted."""
        if not self.file:
            return GLOBAL_LOCATION
        parts = [self.file]
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        return ":".join(parts)

    def key(self) -> tuple[str, int, int, str, str]:
        """Identity used for deduplication."""
        return (self.file or "", self.line or 0, self.column or 0, self.code or "", self.message)

    def with_category(self, category: str) -> Diagnostic:
        return replace(self, category=category)

    def to_dict(self) -> dict[str, Any]:
        return {
            "tool": self.tool,
            "severity": self.severity,
            "code": self.code,
            "category": self.category,
            "message": self.message,
            "file": self.file,
            "line": self.line,
            "column": self.column,
        }


def sort_diagnostics(diagnostics: list[Diagnostic] | tuple[Diagnostic, ...]) -> list[Diagnostic]:
    """Order by severity (errors first), then by location."""
    return sorted(
        diagnostics,
        key=lambda d: (-d.rank, d.file or "", d.line or 0, d.column or 0, d.code or "", d.message),
    )


@dataclass(frozen=True)
class Artifact:
    """An emitted build output as printed by the bundler."""

    name: str
    size: str
    gzip_size: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "size": self.size, "gzip_size": self.gzip_size}


@dataclass(frozen=True)
class DiagnosticGroup:
    """Diagnostics sharing a grouping key."""

    key: str
    diagnostics: tuple[Diagnostic, ...]

    @property
    def error_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == "error")

    @property
    def warning_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == "warning")

    def __len__(self) -> int:
        return len(self.diagnostics)


@dataclass(frozen=True)
class RootCause:
    """A root-cause category with its frequency and a representative diagnostic."""

    category: str
    count: int
    example: Diagnostic


@dataclass(frozen=True)
class BuildReport:
    """Normalized result of parsing one build log."""

    tool: str
    status: ReportStatus
    diagnostics: tuple[Diagnostic, ...] = ()
    reported_errors: int | None = None
    reported_warnings: int | None = None
    duration_seconds: float | None = None
    artifacts: tuple[Artifact, ...] = ()
    modules_transformed: int | None = None
    warnings: tuple[str, ...] = ()
    source_lines: int = 0

    @property
    def error_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == "error")

    @property
    def warning_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == "warning")

    @property
    def counts_by_severity(self) -> dict[str, int]:
        counts = {"error": 0, "warning": 0, "info": 0}
        for diagnostic in self.diagnostics:
            counts[diagnostic.severity] = counts.get(diagnostic.severity, 0) + 1
        return counts

    @property
    def counts_by_file(self) -> dict[str, int]:
        return _sorted_counts(d.file or GLOBAL_LOCATION for d in self.diagnostics)

    @property
    def counts_by_code(self) -> dict[str, int]:
        return _sorted_counts(d.code for d in self.diagnostics if d.code)

    @property
    def counts_by_category(self) -> dict[str, int]:
        return _sorted_counts(d.category for d in self.diagnostics)

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": SCHEMA_VERSION,
            "tool": self.tool,
            "status": self.status,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "reported_errors": self.reported_errors,
            "reported_warnings": self.reported_warnings,
            "duration_seconds": self.duration_seconds,
            "modules_transformed": self.modules_transformed,
            "counts_by_severity": self.counts_by_severity,
            "counts_by_file": self.counts_by_file,
            "counts_by_code": self.counts_by_code,
            "counts_by_category": self.counts_by_category,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "artifacts": [a.to_dict() for a in self.artifacts],
            "warnings": list(self.warnings),
        }


def _sorted_counts(values: Any) -> dict[str, int]:
    counts: dict[str, int] = {}
    for value in values:
        counts[value] = counts.get(value, 0) + 1
    return dict(sorted(counts.items()))


@dataclass(frozen=True)
class SkillReference:
    """A Markdown file under a skill's ``references/`` directory."""

    name: str
    path: Path
    title: str | None = None


@dataclass(frozen=True)
class SkillSection:
    """An ATX heading in a SKILL.md body."""

    heading: str
    level: int
    line: int


@dataclass(frozen=True)
class SkillLink:
    """A relative Markdown link target in a SKILL.md body."""

    target: str
    line: int


@dataclass(frozen=True)
class SkillDocument:
    """Parsed SKILL.md file."""

    file_path: Path
    raw_text: str
    frontmatter: dict[str, Any] | None
    body: str
    body_start_line: int = 1
    sections: tuple[SkillSection, ...] = ()
    links: tuple[SkillLink, ...] = ()
    references: tuple[SkillReference, ...] = ()

    @property
    def name(self) -> str | None:
        return self._frontmatter_string("name")

    @property
    def description(self) -> str | None:
        return self._frontmatter_string("description")

    @property
    def directory(self) -> Path:
        return self.file_path.parent

    def _frontmatter_string(self, key: str) -> str | None:
        if not self.frontmatter:
            return None
        value = self.frontmatter.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    def to_prompt(self, *, include_references: bool = False) -> str:
        """Render the skill as agent context."""
        name = self.name or self.directory.name
        parts = [f"## Skill: {name}"]
        if self.description:
            parts.append(self.description)
        if self.body:
            parts.append(self.body)
        if include_references:
            for reference in self.references:
                try:
                    text = reference.path.read_text(encoding="utf-8").strip()
                except UnicodeDecodeError as exc:
                    raise SkillParseError(f"{reference.path} is not valid UTF-8 text: {exc}") from exc
                except OSError as exc:
                    raise SkillParseError(f"Cannot read {reference.path}: {exc}") from exc
                parts.append(f"### Reference: {reference.name}\n\n{text}")
        return "\n\n".join(parts) + "\n"


@dataclass(frozen=True)
class CommitFooter:
    """A git trailer style footer of a commit message."""

    token: str
    value: str
    line: int

    @property
    def is_breaking(self) -> bool:
        return self.token in BREAKING_CHANGE_TOKENS


@dataclass(frozen=True)
class CommitMessage:
    """A commit message split into Conventional Commits parts."""

    raw: str
    header: str
    type: str | None = None
    scope: str | None = None
    description: str | None = None
    bang: bool = False
    body: str | None = None
    footers: tuple[CommitFooter, ...] = ()
    lines: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_conventional(self) -> bool:
        return self.type is not None

    @property
    def breaking(self) -> bool:
        return self.bang or any(footer.is_breaking for footer in self.footers)


@dataclass(frozen=True)
class JsDocTag:
    """One ``@tag`` inside a JSDoc block."""

    tag: str
    type: str | None = None
    name: str | None = None
    optional: bool = False
    description: str = ""


@dataclass(frozen=True)
class JsDocBlock:
    """Parsed ``/** ... */`` comment."""

    description: str
    tags: tuple[JsDocTag, ...] = ()
    line: int = 1

    def tags_named(self, tag: str) -> tuple[JsDocTag, ...]:
        return tuple(t for t in self.tags if t.tag == tag)

    @property
    def params(self) -> tuple[JsDocTag, ...]:
        return self.tags_named("param")

    @property
    def has_returns(self) -> bool:
        return bool(self.tags_named("returns"))


@dataclass(frozen=True)
class FunctionSignature:
    """A JavaScript/TypeScript function declaration found in source text."""

    name: str
    line: int
    exported: bool
    params: tuple[str, ...] = ()
    returns_value: bool = False
    jsdoc: JsDocBlock | None = None
