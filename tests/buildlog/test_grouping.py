"""Tests for deduplication, categorisation, grouping and root causes."""

from __future__ import annotations

import pytest

from scribe.buildlog import categorize, dedupe_diagnostics, group_diagnostics, root_causes
from scribe.model import Diagnostic


def _diag(
    *,
    tool: str = "tsc",
    severity: str = "error",
    message: str = "boom",
    file: str | None = "src/a.ts",
    line: int | None = 1,
    code: str | None = None,
    category: str = "other",
    source_line: int | None = None,
) -> Diagnostic:
    return Diagnostic(
        tool=tool,
        severity=severity,  # type: ignore[arg-type]
        message=message,
        file=file,
        line=line,
        column=1,
        code=code,
        category=category,
        source_line=source_line,
    )


def test_dedupe_keeps_first_occurrence() -> None:
    first = _diag(message="same", source_line=3)
    duplicate = _diag(message="same", source_line=9)
    other = _diag(message="different")

    assert dedupe_diagnostics([first, duplicate, other]) == [first, other]


@pytest.mark.parametrize(
    ("diagnostic", "expected"),
    [
        (_diag(code="TS2307"), "missing-module"),
        (_diag(tool="webpack", code="module-not-found"), "missing-module"),
        (_diag(code="TS2304"), "undefined-name"),
        (_diag(tool="eslint", code="no-undef"), "undefined-name"),
        (_diag(code="TS2322"), "type-mismatch"),
        (_diag(code="TS1005"), "syntax"),
        (_diag(tool="eslint", message="Parsing error: Unexpected token )"), "syntax"),
        (_diag(tool="eslint", code="@typescript-eslint/no-unused-vars"), "unused-code"),
        (_diag(tool="eslint", code="no-console"), "style"),
        (_diag(tool="webpack", code="asset-size-limit"), "bundle-size"),
        (_diag(tool="vite", code="vite-warning", message="Some chunks are larger than 500 kB"), "bundle-size"),
        (_diag(tool="generic", message="Cannot find module 'x'"), "missing-module"),
        (_diag(code="TS9999"), "other"),
    ],
    ids=[
        "ts_missing_module",
        "webpack_module_not_found",
        "ts_undefined_name",
        "eslint_no_undef",
        "ts_type_mismatch",
        "ts_syntax",
        "eslint_parsing_error",
        "ts_eslint_unused",
        "eslint_style_rule",
        "webpack_asset_size",
        "vite_chunk_size",
        "message_cannot_find_module",
        "unknown_code",
    ],
)
def test_categorize(diagnostic: Diagnostic, expected: str) -> None:
    assert categorize(diagnostic) == expected


def test_group_by_file_orders_by_error_count_then_size() -> None:
    diagnostics = [
        _diag(file="b.ts", severity="warning", message="w1"),
        _diag(file="b.ts", severity="warning", message="w2"),
        _diag(file="b.ts", severity="warning", message="w3"),
        _diag(file="a.ts", severity="error", message="e1"),
        _diag(file="c.ts", severity="error", message="e2", line=9),
        _diag(file="c.ts", severity="error", message="e3", line=2),
    ]

    groups = group_diagnostics(diagnostics, "file")

    assert [group.key for group in groups] == ["c.ts", "a.ts", "b.ts"]
    assert [d.line for d in groups[0].diagnostics] == [2, 9]
    assert (groups[0].error_count, groups[2].warning_count) == (2, 3)


def test_group_entries_put_errors_first() -> None:
    diagnostics = [
        _diag(severity="warning", line=1, message="w"),
        _diag(severity="error", line=5, message="e"),
    ]

    (group,) = group_diagnostics(diagnostics, "code")

    assert group.key == "(none)"
    assert [d.severity for d in group.diagnostics] == ["error", "warning"]


def test_group_by_file_uses_global_key_without_file() -> None:
    (group,) = group_diagnostics([_diag(file=None, line=None)], "file")

    assert group.key == "<global>"


def test_group_by_none_returns_single_group() -> None:
    groups = group_diagnostics([_diag(file="a.ts"), _diag(file="b.ts")], "none")

    assert len(groups) == 1
    assert groups[0].key == "all"
    assert len(groups[0]) == 2


def test_group_by_rejects_unknown_key() -> None:
    with pytest.raises(ValueError, match="group_by"):
        group_diagnostics([], "rule")  # type: ignore[arg-type]


def test_root_causes_excludes_other_when_specific_categories_exist() -> None:
    diagnostics = [
        _diag(category="other", message="o1"),
        _diag(category="other", message="o2"),
        _diag(category="other", message="o3"),
        _diag(category="type-mismatch", message="t1"),
        _diag(category="missing-module", message="m1"),
        _diag(category="missing-module", message="m2"),
    ]

    causes = root_causes(diagnostics)

    assert [(c.category, c.count) for c in causes] == [("missing-module", 2), ("type-mismatch", 1)]
    assert causes[0].example.message == "m1"


def test_root_causes_keeps_other_when_alone() -> None:
    causes = root_causes([_diag(category="other")])

    assert [c.category for c in causes] == ["other"]


def test_root_causes_rank_errors_before_frequent_warnings() -> None:
    diagnostics = [_diag(severity="warning", category="style", message=f"s{i}") for i in range(5)]
    diagnostics.append(_diag(category="syntax", message="x"))

    causes = root_causes(diagnostics, limit=1)

    assert [c.category for c in causes] == ["syntax"]
