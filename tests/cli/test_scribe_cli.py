"""End-to-end tests for the ``scribe`` command line."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from scribe.cli.main import build_parser, main


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    """Return an empty workspace root."""
    root = tmp_path / "ws"
    root.mkdir()
    return root


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("scribe ")


def test_parser_defaults(tmp_path: Path) -> None:
    args = build_parser().parse_args(["report", "-r", str(tmp_path)])

    assert (args.input, args.tool, args.output_format, args.fail_on) == ("-", "auto", "json", None)
    assert args.group_by is None


def test_parser_rejects_unknown_tool() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["report", "--tool", "rollup"])


def test_report_failed_build(workspace: Path, logs_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["report", "-r", str(workspace), "-i", str(logs_root / "tsc.log")])

    out = capsys.readouterr().out
    assert code == 1
    assert "  Status      failed" in out
    assert "  [src/app.ts]  errors=2  warnings=0  diagnostics=2" in out


def test_report_passed_build(workspace: Path, logs_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["report", "-r", str(workspace), "-i", str(logs_root / "vite-success.log")])

    assert code == 0
    assert "  Tool        vite" in capsys.readouterr().out


def test_report_reads_stdin(
    workspace: Path,
    logs_root: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO((logs_root / "eslint-stylish.log").read_text(encoding="utf-8")))

    code = main(["report", "-r", str(workspace), "--summary-only"])

    out = capsys.readouterr().out
    assert code == 1
    assert "  Tool        eslint" in out
    assert "grouped by" not in out


def test_report_writes_outputs(workspace: Path, logs_root: Path, tmp_path: Path) -> None:
    out_dir = tmp_path / "out"

    code = main(
        [
            "report",
            "-r",
            str(workspace),
            "-i",
            str(logs_root / "webpack.log"),
            "-o",
            str(out_dir),
            "--output-format",
            "json,markdown,sarif,csv",
            "--no-stdout",
        ]
    )

    assert code == 1
    assert sorted(p.name for p in out_dir.iterdir()) == ["report.csv", "report.json", "report.md", "report.sarif"]
    payload = json.loads((out_dir / "report.json").read_text(encoding="utf-8"))
    assert payload["tool"] == "webpack"
    assert payload["reported_errors"] == 2


def test_report_markdown_stdout(workspace: Path, logs_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["report", "-r", str(workspace), "-i", str(logs_root / "vite-unresolved.log"), "--stdout-format", "markdown"])

    assert capsys.readouterr().out.startswith("## ❌ Build failed (vite)")


def test_report_fail_on_overrides_status(
    workspace: Path, logs_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    log = str(logs_root / "eslint-stylish.log")

    assert main(["report", "-r", str(workspace), "-i", log, "--fail-on", "error", "--no-stdout"]) == 1
    assert main(["report", "-r", str(workspace), "-i", str(logs_root / "vite-success.log"), "--fail-on", "warning"]) == 0


def test_report_uses_config_defaults(workspace: Path, logs_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (workspace / "scribe.yaml").write_text("report:\n  group_by: code\n  max_per_group: 1\n", encoding="utf-8")

    main(["report", "-r", str(workspace), "-i", str(logs_root / "tsc.log")])

    out = capsys.readouterr().out
    assert "Diagnostics (grouped by code)" in out
    assert "  [TS2322]  errors=1" in out


@pytest.mark.parametrize(
    "extra",
    [
        ["--output-format", "xml", "-o", "out"],
        ["--max-per-group", "0"],
        ["-i", "does-not-exist.log"],
    ],
    ids=["bad_format", "bad_max_per_group", "missing_input"],
)
def test_report_usage_errors(workspace: Path, extra: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["report", "-r", str(workspace), *extra]) == 2
    assert capsys.readouterr().err


def test_invalid_config_blocks_commands(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (workspace / "scribe.yaml").write_text("reprot: {}\n", encoding="utf-8")

    assert main(["commit-lint", "-r", str(workspace)]) == 2
    err = capsys.readouterr().err
    assert "CFG004 reprot: unknown key `reprot`" in err
    assert "did you mean `report`?" in err


def test_validate_config(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["validate-config", "-r", str(workspace)]) == 0
    assert "Configuration is valid." in capsys.readouterr().out

    assert main(["validate-config", "-r", str(workspace), "-c", str(workspace / "missing.yaml")]) == 2
    assert "CFG001" in capsys.readouterr().err


def test_commit_lint_file(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    message = workspace / "COMMIT_EDITMSG"
    message.write_text("Update stuff\n", encoding="utf-8")

    assert main(["commit-lint", "-r", str(workspace), str(message)]) == 1
    out = capsys.readouterr().out
    assert f"{message}:1: error CC001" in out
    assert "1 error(s), 0 warning(s), 0 info" in out


def test_commit_lint_strict(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    message = workspace / "msg"
    message.write_text("feat: Add thing\n", encoding="utf-8")

    assert main(["commit-lint", "-r", str(workspace), str(message)]) == 0
    assert main(["commit-lint", "-r", str(workspace), str(message), "--strict"]) == 1


def test_commit_lint_stdin(
    workspace: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("fix(cli): handle empty input\n"))

    assert main(["commit-lint", "-r", str(workspace)]) == 0
    assert capsys.readouterr().out.strip() == "Commit message OK."


def test_commit_lint_uses_config_scopes(
    workspace: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    (workspace / "scribe.yaml").write_text("commits:\n  scopes: [cli]\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("fix(api): handle empty input\n"))

    assert main(["commit-lint", "-r", str(workspace)]) == 1
    assert "<stdin>:1: error CC008" in capsys.readouterr().out


def test_jsdoc(js_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["jsdoc", "-r", str(js_repo_root)]) == 0
    out = capsys.readouterr().out
    assert "src/math.js:11: warning JSD001 function 'subtract' has no JSDoc comment" in out
    assert "0 error(s), 4 warning(s), 1 info" in out

    assert main(["jsdoc", "-r", str(js_repo_root), "--fail-on", "warning"]) == 1


def test_jsdoc_explicit_path(js_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["jsdoc", "-r", str(js_repo_root), "src/api.ts"])

    out = capsys.readouterr().out
    assert "src/math.js" not in out
    assert "src/api.ts:11: warning JSD004" in out


def test_skills_list(skills_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["skills", "list", "-r", str(skills_repo_root)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert [line.split("\t")[:2] for line in lines] == [
        ["commit-style", "commit-style/SKILL.md"],
        ["log-triage", "log-triage/SKILL.md"],
    ]


def test_skills_list_reports_parse_failures(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (workspace / "broken").mkdir()
    (workspace / "broken" / "SKILL.md").write_text("---\nname: broken\n", encoding="utf-8")

    assert main(["skills", "list", "-r", str(workspace)]) == 1
    captured = capsys.readouterr()
    assert "No skills found." in captured.out
    assert "broken/SKILL.md: error SKL000" in captured.err


def test_skills_validate(skills_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["skills", "validate", "-r", str(skills_repo_root)]) == 0
    assert "log-triage/SKILL.md: info SKL008" in capsys.readouterr().out


def test_skills_show(skills_repo_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["skills", "show", "log-triage", "-r", str(skills_repo_root), "--references"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("## Skill: log-triage")
    assert "### Reference: patterns.md" in out

    assert main(["skills", "show", "log-triag", "-r", str(skills_repo_root)]) == 1
    assert "did you mean: log-triage" in capsys.readouterr().err


def test_skills_show_undecodable_reference(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    skill_dir = workspace / "latin"
    (skill_dir / "references").mkdir(parents=True)
    (skill_dir / "SKILL.md").write_text("---\nname: latin\ndescription: d\n---\nBody\n", encoding="utf-8")
    (skill_dir / "references" / "notes.md").write_bytes(b"# Caf\xe9\n")

    assert main(["skills", "show", "latin", "-r", str(workspace), "--references"]) == 1
    assert "Skill error" in capsys.readouterr().err



def test_commit_lint_missing_file(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["commit-lint", "-r", str(workspace), str(workspace / "missing")]) == 2
    assert "Cannot read commit message" in capsys.readouterr().err
