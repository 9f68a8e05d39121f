"""Shared exception hierarchy for Scribe."""

from __future__ import annotations

from .base import ScribeError
from .config import ConfigError
from .parsing import CommitParseError, LogParseError, SkillNotFoundError, SkillParseError

__all__ = [
    "CommitParseError",
    "ConfigError",
    "LogParseError",
    "ScribeError",
    "SkillNotFoundError",
    "SkillParseError",
]
