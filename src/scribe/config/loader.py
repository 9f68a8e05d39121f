"""Config loading and normalization for Scribe."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml

from scribe.config.model import ScribeConfig
from scribe.constants.commits import (
    DEFAULT_COMMIT_TYPES,
    DEFAULT_IGNORE_PATTERNS,
    DEFAULT_MAX_BODY_LINE_LENGTH,
    DEFAULT_MAX_HEADER_LENGTH,
)
from scribe.constants.config import CONFIG_FILENAME, DEFAULT_MAX_FILE_MB, DEFAULT_SKILL_GLOBS
from scribe.constants.jsdoc import DEFAULT_JSDOC_EXCLUDE, DEFAULT_JSDOC_INCLUDE
from scribe.constants.reporting import DEFAULT_GROUP_BY, DEFAULT_MAX_PER_GROUP, VALID_GROUP_BY
from scribe.constants.severity import VALID_SEVERITIES
from scribe.exceptions import ConfigError
from scribe.types.config import CommitsConfig, JsDocConfig, ReportConfig


def resolve_config_path(root: Path, config_path: Path | None = None) -> Path:
    """Return the explicit config path or ``<root>/scribe.yaml``."""
    return config_path.resolve() if config_path else (root.resolve() / CONFIG_FILENAME)


def load_config(root: Path, config_path: Path | None = None) -> ScribeConfig:
    """Load and validate config from ``scribe.yaml`` or an explicit path."""
    path = resolve_config_path(root, config_path)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return ScribeConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    report_raw = _ensure_mapping(raw.get("report"), "report")
    commits_raw = _ensure_mapping(raw.get("commits"), "commits")
    jsdoc_raw = _ensure_mapping(raw.get("jsdoc"), "jsdoc")

    return ScribeConfig(
        skill_globs=tuple(_ensure_string_list(raw.get("skill_globs", list(DEFAULT_SKILL_GLOBS)), "skill_globs")),
        max_file_mb=_ensure_positive_int(raw.get("max_file_mb", DEFAULT_MAX_FILE_MB), "max_file_mb"),
        report=_build_report_config(report_raw),
        commits=_build_commits_config(commits_raw),
        jsdoc=_build_jsdoc_config(jsdoc_raw),
    )


def _build_report_config(raw: dict[str, Any]) -> ReportConfig:
    group_by = raw.get("group_by", DEFAULT_GROUP_BY)
    if not isinstance(group_by, str) or group_by not in VALID_GROUP_BY:
        raise ConfigError(f"report.group_by must be one of {list(VALID_GROUP_BY)}, got {group_by!r}")

    min_severity = raw.get("min_severity")
    if min_severity is not None and (not isinstance(min_severity, str) or min_severity not in VALID_SEVERITIES):
        raise ConfigError(f"report.min_severity must be one of {sorted(VALID_SEVERITIES)}, got {min_severity!r}")

    return ReportConfig(
        group_by=group_by,  # type: ignore[arg-type]
        max_per_group=_ensure_positive_int(raw.get("max_per_group", DEFAULT_MAX_PER_GROUP), "report.max_per_group"),
        min_severity=min_severity,  # type: ignore[arg-type]
    )


def _build_commits_config(raw: dict[str, Any]) -> CommitsConfig:
    types = tuple(
        t.strip() for t in _ensure_string_list(raw.get("types", list(DEFAULT_COMMIT_TYPES)), "commits.types") if t.strip()
    )
    if not types:
        raise ConfigError("commits.types must contain at least one type")

    ignore_patterns = tuple(
        _ensure_string_list(raw.get("ignore_patterns", list(DEFAULT_IGNORE_PATTERNS)), "commits.ignore_patterns")
    )
    for pattern in ignore_patterns:
        try:
            re.compile(pattern)
        except re.error as exc:
            raise ConfigError(f"commits.ignore_patterns contains an invalid regex {pattern!r}: {exc}") from exc

    return CommitsConfig(
        types=types,
        scopes=tuple(s.strip() for s in _ensure_string_list(raw.get("scopes", []), "commits.scopes") if s.strip()),
        require_scope=_ensure_bool(raw.get("require_scope", False), "commits.require_scope"),
        max_header_length=_ensure_positive_int(
            raw.get("max_header_length", DEFAULT_MAX_HEADER_LENGTH), "commits.max_header_length"
        ),
        max_body_line_length=_ensure_positive_int(
            raw.get("max_body_line_length", DEFAULT_MAX_BODY_LINE_LENGTH), "commits.max_body_line_length"
        ),
        ignore_patterns=ignore_patterns,
    )


def _build_jsdoc_config(raw: dict[str, Any]) -> JsDocConfig:
    return JsDocConfig(
        include=tuple(_ensure_string_list(raw.get("include", list(DEFAULT_JSDOC_INCLUDE)), "jsdoc.include")),
        exclude=tuple(_ensure_string_list(raw.get("exclude", list(DEFAULT_JSDOC_EXCLUDE)), "jsdoc.exclude")),
        exported_only=_ensure_bool(raw.get("exported_only", True), "jsdoc.exported_only"),
        require_returns=_ensure_bool(raw.get("require_returns", True), "jsdoc.require_returns"),
        require_param_types=_ensure_bool(raw.get("require_param_types", True), "jsdoc.require_param_types"),
    )


def _ensure_mapping(value: Any, key_name: str) -> dict[str, Any]:
    """Coerce a nested section to a mapping, treating ``None`` as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key_name} must be a mapping")
    return value


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _ensure_bool(value: Any, key_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key_name} must be a boolean")
    return value


def _ensure_positive_int(value: Any, key_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{key_name} must be a positive integer")
    return value
