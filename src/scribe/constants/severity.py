"""Constants for severity ranking."""

from __future__ import annotations

SEVERITY_RANK: dict[str, int] = {"info": 0, "warning": 1, "error": 2}
VALID_SEVERITIES: frozenset[str] = frozenset(SEVERITY_RANK)
SEVERITY_CHOICES: tuple[str, ...] = ("info", "warning", "error")
