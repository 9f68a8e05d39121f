"""Tests for scribe.yaml loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from scribe.config import ScribeConfig, load_config, resolve_config_path
from scribe.exceptions import ConfigError


def _write_config(root: Path, text: str) -> Path:
    path = root / "scribe.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_default_config_uses_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path) == ScribeConfig()


def test_missing_explicit_config_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path, tmp_path / "other.yaml")


def test_resolve_config_path(tmp_path: Path) -> None:
    assert resolve_config_path(tmp_path) == tmp_path.resolve() / "scribe.yaml"
    assert resolve_config_path(tmp_path, tmp_path / "ci.yaml") == (tmp_path / "ci.yaml").resolve()


def test_full_config(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
skill_globs: ["skills/**/SKILL.md"]
max_file_mb: 4
report:
  group_by: category
  max_per_group: 5
  min_severity: warning
commits:
  types: [feat, fix]
  scopes: [cli, report]
  require_scope: true
  max_header_length: 50
jsdoc:
  exported_only: false
  exclude: ["vendor/**"]
""",
    )

    config = load_config(tmp_path)

    assert config.skill_globs == ("skills/**/SKILL.md",)
    assert config.max_file_bytes == 4 * 1024 * 1024
    assert (config.report.group_by, config.report.max_per_group, config.report.min_severity) == (
        "category",
        5,
        "warning",
    )
    assert config.commits.types == ("feat", "fix")
    assert config.commits.scopes == ("cli", "report")
    assert config.commits.require_scope is True
    assert config.commits.max_header_length == 50
    assert config.commits.max_body_line_length == 100
    assert config.jsdoc.exported_only is False
    assert config.jsdoc.exclude == ("vendor/**",)
    assert config.jsdoc.require_returns is True


def test_empty_file_and_null_sections(tmp_path: Path) -> None:
    _write_config(tmp_path, "report:\ncommits:\n")

    assert load_config(tmp_path) == ScribeConfig()


@pytest.mark.parametrize(
    ("text", "match"),
    [
        ("report: [\n", "Invalid YAML"),
        ("- a\n- b\n", "must be a YAML mapping"),
        ("report: yes\n", "report must be a mapping"),
        ("report:\n  group_by: folder\n", "report.group_by must be one of"),
        ("report:\n  min_severity: fatal\n", "report.min_severity must be one of"),
        ("max_file_mb: 0\n", "max_file_mb must be a positive integer"),
        ("commits:\n  types: []\n", "at least one type"),
        ("commits:\n  ignore_patterns: ['(']\n", "invalid regex"),
        ("jsdoc:\n  exported_only: 'no'\n", "jsdoc.exported_only must be a boolean"),
        ("skill_globs: SKILL.md\n", "skill_globs must be a list of strings"),
    ],
    ids=[
        "invalid_yaml",
        "not_mapping",
        "section_not_mapping",
        "bad_group_by",
        "bad_min_severity",
        "zero_max_file_mb",
        "empty_types",
        "bad_regex",
        "non_bool",
        "non_list",
    ],
)
def test_invalid_config_raises(tmp_path: Path, text: str, match: str) -> None:
    _write_config(tmp_path, text)

    with pytest.raises(ConfigError, match=match):
        load_config(tmp_path)
