"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from pathlib import Path

import pytest

from scribe.model import BuildReport, Diagnostic, sort_diagnostics


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def logs_root(fixtures_root: Path) -> Path:
    """Return the directory holding sample build logs."""
    return fixtures_root / "logs"


@pytest.fixture(scope="session")
def read_log(logs_root: Path):
    """Return a loader for a named sample build log."""

    def _read(name: str) -> str:
        return (logs_root / name).read_text(encoding="utf-8")

    return _read


@pytest.fixture(scope="session")
def skills_repo_root(fixtures_root: Path) -> Path:
    """Return the fixture workspace with sample skills."""
    return fixtures_root / "repos" / "skills"


@pytest.fixture(scope="session")
def js_repo_root(fixtures_root: Path) -> Path:
    """Return the fixture workspace with JavaScript/TypeScript sources."""
    return fixtures_root / "repos" / "js"


@pytest.fixture()
def sample_report() -> BuildReport:
    """Return a failed tsc report with one diagnostic of each severity plus a global note."""
    diagnostics = [
        Diagnostic(
            tool="tsc",
            severity="error",
            message="Type 'string' is not assignable to type 'number'.\n  Second line.",
            file="src/app.ts",
            line=12,
            column=5,
            code="TS2322",
            category="type-mismatch",
        ),
        Diagnostic(
            tool="tsc",
            severity="warning",
            message="'x' is declared but its value is never read.",
            file="src/app.ts",
            line=1,
            column=7,
            code="TS6133",
            category="unused-code",
        ),
        Diagnostic(
            tool="tsc",
            severity="error",
            message="Cannot find module './missing'.",
            file="src/api.ts",
            line=3,
            column=24,
            code="TS2307",
            category="missing-module",
        ),
        Diagnostic(tool="tsc", severity="info", message="Incremental build cache was reused."),
    ]
    return BuildReport(
        tool="tsc",
        status="failed",
        diagnostics=tuple(sort_diagnostics(diagnostics)),
        reported_errors=3,
        duration_seconds=1.5,
        warnings=("tsc reported 3 errors but 2 were parsed",),
        source_lines=10,
    )
