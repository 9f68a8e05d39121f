"""Config file validation for Scribe."""

from __future__ import annotations

import difflib
import re
from pathlib import Path
from typing import Any

import yaml

from scribe.config.loader import resolve_config_path
from scribe.constants.reporting import VALID_GROUP_BY
from scribe.constants.severity import VALID_SEVERITIES
from scribe.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    BOOLEAN_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG009,
    CFG011,
    LIST_OF_STRINGS_KEYS,
    NESTED_SECTION_KEYS,
    POSITIVE_INT_KEYS,
)
from scribe.exceptions.validation import ValidationError

_MISSING = object()


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a scribe.yaml file and return all validation errors.

    This is the collect-all entry point used by ``scribe validate-config``
    and by the preflight of every other command.  It never raises; all
    problems are returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    path = resolve_config_path(root, config_path)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    valid_sections = _validate_sections(raw, path_str, errors)

    for dotted in LIST_OF_STRINGS_KEYS:
        val = _lookup(raw, dotted, valid_sections)
        if val is _MISSING or val is None:
            continue
        if not isinstance(val, (list, tuple)) or not all(isinstance(i, str) for i in val):
            errors.append(_type_error(path_str, dotted, "expected a list of strings"))

    for dotted in BOOLEAN_KEYS:
        val = _lookup(raw, dotted, valid_sections)
        if val is not _MISSING and not isinstance(val, bool):
            errors.append(_type_error(path_str, dotted, "expected a boolean"))

    for dotted in POSITIVE_INT_KEYS:
        val = _lookup(raw, dotted, valid_sections)
        if val is _MISSING:
            continue
        if isinstance(val, bool) or not isinstance(val, int):
            errors.append(_type_error(path_str, dotted, "expected a positive integer"))
        elif val <= 0:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field=dotted,
                    message=f"`{dotted}` must be a positive integer, got {val}",
                )
            )

    group_by = _lookup(raw, "report.group_by", valid_sections)
    if group_by is not _MISSING and group_by not in VALID_GROUP_BY:
        errors.append(_enum_error(path_str, "report.group_by", VALID_GROUP_BY, group_by))

    min_severity = _lookup(raw, "report.min_severity", valid_sections)
    if min_severity is not _MISSING and min_severity is not None and (
        not isinstance(min_severity, str) or min_severity not in VALID_SEVERITIES
    ):
        errors.append(_enum_error(path_str, "report.min_severity", tuple(sorted(VALID_SEVERITIES)), min_severity))

    types = _lookup(raw, "commits.types", valid_sections)
    if isinstance(types, list) and not any(isinstance(t, str) and t.strip() for t in types):
        errors.append(
            ValidationError(
                code=CFG007,
                path=path_str,
                field="commits.types",
                message="`commits.types` must contain at least one type",
            )
        )

    patterns = _lookup(raw, "commits.ignore_patterns", valid_sections)
    if isinstance(patterns, list):
        for pattern in patterns:
            if not isinstance(pattern, str):
                continue
            try:
                re.compile(pattern)
            except re.error as exc:
                errors.append(
                    ValidationError(
                        code=CFG011,
                        path=path_str,
                        field="commits.ignore_patterns",
                        message=f"invalid regular expression {pattern!r}",
                        hint=str(exc),
                    )
                )

    return errors


def _validate_sections(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> set[str]:
    """Validate nested section shapes and return the names that are usable mappings."""
    valid: set[str] = set()
    for section, allowed in sorted(NESTED_SECTION_KEYS.items()):
        if section not in raw or raw[section] is None:
            continue
        block = raw[section]
        if not isinstance(block, dict):
            errors.append(
                ValidationError(
                    code=CFG009,
                    path=path_str,
                    field=section,
                    message=f"`{section}` must be a mapping",
                )
            )
            continue
        valid.add(section)
        for key in sorted(block.keys(), key=str):
            if key not in allowed:
                errors.append(
                    ValidationError(
                        code=CFG004,
                        path=path_str,
                        field=f"{section}.{key}",
                        message=f"unknown key `{key}` in `{section}`",
                        hint=_suggest_key(str(key), allowed),
                    )
                )
    return valid


def _lookup(raw: dict[str, Any], dotted: str, valid_sections: set[str]) -> Any:
    """Fetch ``section.key`` or ``key`` from the raw mapping, or ``_MISSING``."""
    if "." not in dotted:
        return raw.get(dotted, _MISSING)
    section, key = dotted.split(".", 1)
    if section not in valid_sections:
        return _MISSING
    return raw[section].get(key, _MISSING)


def _type_error(path_str: str, dotted: str, hint: str) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path_str,
        field=dotted,
        message=f"invalid type for `{dotted}`",
        hint=hint,
    )


def _enum_error(path_str: str, dotted: str, allowed: tuple[str, ...], got: Any) -> ValidationError:
    return ValidationError(
        code=CFG006,
        path=path_str,
        field=dotted,
        message=f"invalid value for `{dotted}`",
        hint=f"expected one of: {', '.join(allowed)}; got: {got!r}",
    )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
