"""Parsing-related exceptions."""

from __future__ import annotations

from scribe.exceptions.base import ScribeError


class SkillParseError(ScribeError, ValueError):
    """Raised when a SKILL.md file cannot be parsed."""


class SkillNotFoundError(ScribeError, LookupError):
    """Raised when a named skill does not exist under the workspace root."""


class LogParseError(ScribeError, ValueError):
    """Raised when build output cannot be handled by any parser."""


class CommitParseError(ScribeError, ValueError):
    """Raised when a commit message source cannot be read."""
