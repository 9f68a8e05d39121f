"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid enum value
CFG007: str = "CFG007"  # value out of range
CFG009: str = "CFG009"  # invalid nested mapping
CFG010: str = "CFG010"  # root directory not found
CFG011: str = "CFG011"  # invalid regular expression

ALL_CFG_CODES: tuple[str, ...] = (
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG009,
    CFG010,
    CFG011,
)

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "skill_globs",
        "max_file_mb",
        "report",
        "commits",
        "jsdoc",
    }
)

ALLOWED_REPORT_KEYS: frozenset[str] = frozenset({"group_by", "max_per_group", "min_severity"})
ALLOWED_COMMITS_KEYS: frozenset[str] = frozenset(
    {
        "types",
        "scopes",
        "require_scope",
        "max_header_length",
        "max_body_line_length",
        "ignore_patterns",
    }
)
ALLOWED_JSDOC_KEYS: frozenset[str] = frozenset(
    {
        "include",
        "exclude",
        "exported_only",
        "require_returns",
        "require_param_types",
    }
)

NESTED_SECTION_KEYS: dict[str, frozenset[str]] = {
    "report": ALLOWED_REPORT_KEYS,
    "commits": ALLOWED_COMMITS_KEYS,
    "jsdoc": ALLOWED_JSDOC_KEYS,
}

LIST_OF_STRINGS_KEYS: tuple[str, ...] = (
    "skill_globs",
    "commits.types",
    "commits.scopes",
    "commits.ignore_patterns",
    "jsdoc.include",
    "jsdoc.exclude",
)
BOOLEAN_KEYS: tuple[str, ...] = (
    "commits.require_scope",
    "jsdoc.exported_only",
    "jsdoc.require_returns",
    "jsdoc.require_param_types",
)
POSITIVE_INT_KEYS: tuple[str, ...] = (
    "max_file_mb",
    "report.max_per_group",
    "commits.max_header_length",
    "commits.max_body_line_length",
)
