"""Config data model for Scribe."""

from __future__ import annotations

from dataclasses import dataclass

from scribe.constants.config import DEFAULT_MAX_FILE_MB, DEFAULT_SKILL_GLOBS
from scribe.types.config import CommitsConfig, JsDocConfig, ReportConfig


@dataclass(frozen=True)
class ScribeConfig:
    """Resolved workspace config."""

    skill_globs: tuple[str, ...] = DEFAULT_SKILL_GLOBS
    max_file_mb: int = DEFAULT_MAX_FILE_MB
    report: ReportConfig = ReportConfig()
    commits: CommitsConfig = CommitsConfig()
    jsdoc: JsDocConfig = JsDocConfig()

    @property
    def max_file_bytes(self) -> int:
        return self.max_file_mb * 1024 * 1024
