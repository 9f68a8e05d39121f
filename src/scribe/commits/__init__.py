"""Conventional Commits parsing and linting."""

from .lint import is_ignored, lint_commit_message
from .parser import clean_message, parse_commit_message, read_commit_message

__all__ = ["clean_message", "is_ignored", "lint_commit_message", "parse_commit_message", "read_commit_message"]
