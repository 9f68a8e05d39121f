"""Configuration-related exceptions."""

from __future__ import annotations

from scribe.exceptions.base import ScribeError


class ConfigError(ScribeError, ValueError):
    """Raised when configuration or CLI options are invalid."""
