"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from scribe.buildlog import build_report
from scribe.commits import lint_commit_message, read_commit_message
from scribe.config import ScribeConfig, load_config
from scribe.constants.commits import STDIN_SOURCE
from scribe.constants.reporting import STDOUT_FORMAT_MARKDOWN, STATUS_FAILED
from scribe.exceptions import CommitParseError, ConfigError, ScribeError
from scribe.exceptions.validation import format_errors
from scribe.io import read_text_input
from scribe.io.json_io import STDIN_MARKER
from scribe.jsdoc import check_tree
from scribe.model import Diagnostic
from scribe.reporting.markdown import render_markdown
from scribe.reporting.stdout import StdoutReporter, render_diagnostics_text
from scribe.reporting.writer import evaluate_fail_threshold, parse_output_formats, write_report_outputs
from scribe.skills import find_skill, load_skills, skill_lookup_name, validate_skills
from scribe.skills.discovery import stable_path_key
from scribe.validation import preflight_validate

logger = logging.getLogger(__name__)


def _load_workspace_config(args: argparse.Namespace) -> ScribeConfig | None:
    """Validate and load config; print problems and return None on failure."""
    errors = preflight_validate(root=args.root, config_path=args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return None
    try:
        return load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return None


def _read_input(value: str) -> str:
    return read_text_input(None if value == STDIN_MARKER else Path(value))


def _summary_line(diagnostics: list[Diagnostic]) -> str:
    errors = sum(1 for d in diagnostics if d.severity == "error")
    warnings = sum(1 for d in diagnostics if d.severity == "warning")
    infos = len(diagnostics) - errors - warnings
    return f"{errors} error(s), {warnings} warning(s), {infos} info"


def _print_diagnostics(diagnostics: list[Diagnostic], ok_message: str) -> None:
    if diagnostics:
        print(render_diagnostics_text(diagnostics, color=sys.stdout.isatty()))
        print(_summary_line(diagnostics))
    else:
        print(ok_message)


def handle_report(args: argparse.Namespace) -> int:
    """Parse a build log and print or write the report."""
    config = _load_workspace_config(args)
    if config is None:
        return 2

    try:
        output_formats = parse_output_formats(args.output_format)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    group_by = args.group_by or config.report.group_by
    max_per_group = args.max_per_group if args.max_per_group is not None else config.report.max_per_group
    if max_per_group < 1:
        print("Configuration error: --max-per-group must be >= 1", file=sys.stderr)
        return 2
    min_severity = args.min_severity or config.report.min_severity

    try:
        text = _read_input(args.input)
    except OSError as exc:
        print(f"Input error: cannot read {args.input}: {exc}", file=sys.stderr)
        return 2

    try:
        report = build_report(text, tool=args.tool)
        if args.output_dir is not None:
            write_report_outputs(
                args.output_dir,
                report,
                output_formats,
                group_by=group_by,
                max_per_group=max_per_group,
                min_severity=min_severity,
            )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except ScribeError as exc:
        print(f"Report error: {exc}", file=sys.stderr)
        return 1

    if not args.no_stdout:
        if args.stdout_format == STDOUT_FORMAT_MARKDOWN:
            print(render_markdown(report, group_by=group_by, max_per_group=max_per_group, min_severity=min_severity))
        else:
            reporter = StdoutReporter(
                report,
                color=not args.no_color and sys.stdout.isatty(),
                verbose=args.verbose,
                group_by=group_by,
                max_per_group=max_per_group,
                min_severity=min_severity,
                summary_only=args.summary_only,
            )
            print(reporter.render())

    if args.fail_on is not None:
        return evaluate_fail_threshold(report.diagnostics, args.fail_on)
    return 1 if report.status == STATUS_FAILED else 0


def handle_commit_lint(args: argparse.Namespace) -> int:
    """Lint a commit message file (or stdin)."""
    config = _load_workspace_config(args)
    if config is None:
        return 2

    try:
        text = read_commit_message(None if args.file == STDIN_MARKER else Path(args.file))
    except CommitParseError as exc:
        print(f"Input error: {exc}", file=sys.stderr)
        return 2

    source = STDIN_SOURCE if args.file == STDIN_MARKER else args.file
    diagnostics = lint_commit_message(text, config.commits, source=source)
    _print_diagnostics(diagnostics, "Commit message OK.")
    return evaluate_fail_threshold(diagnostics, "warning" if args.strict else "error")


def handle_jsdoc(args: argparse.Namespace) -> int:
    """Check JSDoc coverage under the workspace root."""
    config = _load_workspace_config(args)
    if config is None:
        return 2

    diagnostics = check_tree(args.root, config, list(args.paths) or None)
    _print_diagnostics(diagnostics, "JSDoc coverage OK.")
    return evaluate_fail_threshold(diagnostics, args.fail_on)


def handle_skills(args: argparse.Namespace) -> int:
    """Dispatch ``skills list|validate|show``."""
    config = _load_workspace_config(args)
    if config is None:
        return 2

    root = args.root.resolve()
    if args.skills_command == "list":
        documents, failures = load_skills(root, config)
        for doc in documents:
            description = (doc.description or "").split("\n", 1)[0]
            print(f"{skill_lookup_name(doc, root)}\t{stable_path_key(doc.file_path, root)}\t{description}")
        if failures:
            print(render_diagnostics_text(failures), file=sys.stderr)
        if not documents:
            print("No skills found.")
        return 1 if failures else 0

    if args.skills_command == "validate":
        diagnostics = validate_skills(root, config)
        _print_diagnostics(diagnostics, "All skills are valid.")
        return evaluate_fail_threshold(diagnostics, "error")

    try:
        doc = find_skill(root, config, args.name)
        print(doc.to_prompt(include_references=args.references), end="")
    except (ScribeError, OSError) as exc:
        print(f"Skill error: {exc}", file=sys.stderr)
        return 1
    return 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = preflight_validate(root=args.root, config_path=args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0
