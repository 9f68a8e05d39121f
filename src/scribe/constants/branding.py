"""Branding constants for docs and terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SCRIBE"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ SCRIBE",
    "     // build reports, commits and docs for agent skills",
)
REPORT_SUMMARY_TITLE: str = "Build report"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} authoring toolkit"))
