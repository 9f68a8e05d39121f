"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

Severity: TypeAlias = Literal["info", "warning", "error"]
ToolName: TypeAlias = Literal["tsc", "eslint", "webpack", "vite", "generic", "commitlint", "jsdoc", "skills"]
GroupBy: TypeAlias = Literal["file", "code", "category", "severity", "none"]
ReportStatus: TypeAlias = Literal["passed", "passed_with_warnings", "failed"]
