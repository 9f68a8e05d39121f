"""Conventional Commits grammar, defaults and lint codes."""

from __future__ import annotations

import re
from re import Pattern

HEADER_PATTERN: Pattern[str] = re.compile(
    r"^(?P<type>[A-Za-z]+)(?:\((?P<scope>[^()\r\n]*)\))?(?P<breaking>!)?:(?: (?P<description>.*))?$"
)
FOOTER_PATTERN: Pattern[str] = re.compile(
    r"^(?P<token>BREAKING[ -]CHANGE|[A-Za-z][\w-]*)(?P<separator>: | #|:$)(?P<value>.*)$"
)
SCISSORS_PATTERN: Pattern[str] = re.compile(r"^# -+ >8 -+$")
URL_PATTERN: Pattern[str] = re.compile(r"https?://\S+")

BREAKING_CHANGE_TOKENS: frozenset[str] = frozenset({"BREAKING CHANGE", "BREAKING-CHANGE"})

DEFAULT_COMMIT_TYPES: tuple[str, ...] = (
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "perf",
    "test",
    "build",
    "ci",
    "chore",
    "revert",
)
DEFAULT_IGNORE_PATTERNS: tuple[str, ...] = (
    r"^Merge ",
    r'^Revert "',
    r"^fixup! ",
    r"^squash! ",
    r"^amend! ",
)
DEFAULT_MAX_HEADER_LENGTH: int = 72
DEFAULT_MAX_BODY_LINE_LENGTH: int = 100
STDIN_SOURCE: str = "<stdin>"

CC001: str = "CC001"  # header not conventional
CC002: str = "CC002"  # unknown type
CC003: str = "CC003"  # header too long
CC004: str = "CC004"  # description ends with a period
CC005: str = "CC005"  # description starts upper-case
CC006: str = "CC006"  # missing blank line after header
CC007: str = "CC007"  # scope required
CC008: str = "CC008"  # scope not allowed
CC009: str = "CC009"  # empty description
CC010: str = "CC010"  # body line too long
CC011: str = "CC011"  # empty breaking change footer
CC012: str = "CC012"  # empty message
