"""Root exception type."""

from __future__ import annotations


class ScribeError(Exception):
    """Base class for all errors raised by Scribe."""
