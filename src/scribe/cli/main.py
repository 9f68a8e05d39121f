"""CLI entrypoint for Scribe."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from scribe import __version__
from scribe.cli import handlers
from scribe.constants.branding import CLI_DESCRIPTION
from scribe.constants.buildlog import AUTO_TOOL, BUILD_TOOLS
from scribe.constants.reporting import DEFAULT_OUTPUT_FORMAT, VALID_GROUP_BY, VALID_STDOUT_FORMATS
from scribe.constants.severity import SEVERITY_CHOICES


def _workspace_parent() -> argparse.ArgumentParser:
    """Options shared by every subcommand that reads ``scribe.yaml``."""
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument("-r", "--root", type=Path, default=Path("."), help="Workspace root path (default: .)")
    parent.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parent.add_argument("-v", "--verbose", action="store_true", help="Verbose output and debug logging")
    return parent


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="scribe",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)
    workspace = _workspace_parent()

    report = subparsers.add_parser("report", parents=[workspace], help="Summarise a build log")
    report.add_argument("-i", "--input", default="-", help="Build log file, or - for stdin (default: -)")
    report.add_argument(
        "-t",
        "--tool",
        choices=(AUTO_TOOL, *BUILD_TOOLS),
        default=AUTO_TOOL,
        help="Build tool that produced the log (default: auto-detect)",
    )
    report.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Output directory (no files written if omitted)",
    )
    report.add_argument(
        "--output-format",
        default=DEFAULT_OUTPUT_FORMAT,
        help="Comma-separated output formats: json, markdown, sarif, csv (default: json)",
    )
    report.add_argument("--stdout-format", choices=VALID_STDOUT_FORMATS, default="text", help="Stdout rendering")
    report.add_argument("--group-by", choices=VALID_GROUP_BY, default=None, help="Group diagnostics by this key")
    report.add_argument("--max-per-group", type=int, default=None, help="Diagnostics shown per group")
    report.add_argument("--min-severity", choices=SEVERITY_CHOICES, default=None, help="Hide less severe diagnostics")
    report.add_argument(
        "--fail-on",
        choices=("error", "warning"),
        default=None,
        help="Exit 1 when a diagnostic at or above this severity exists",
    )
    report.add_argument("--summary-only", action="store_true", help="Print only the summary header")
    report.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    report.add_argument("--no-color", action="store_true", help="Disable colored output")

    commit_lint = subparsers.add_parser("commit-lint", parents=[workspace], help="Lint a commit message")
    commit_lint.add_argument("file", nargs="?", default="-", help="Commit message file, or - for stdin")
    commit_lint.add_argument("--strict", action="store_true", help="Treat warnings as failures")

    jsdoc = subparsers.add_parser("jsdoc", parents=[workspace], help="Check JSDoc coverage")
    jsdoc.add_argument("paths", nargs="*", type=Path, help="Files or directories (default: the workspace root)")
    jsdoc.add_argument("--fail-on", choices=SEVERITY_CHOICES, default=None, help="Exit 1 at or above this severity")

    skills = subparsers.add_parser("skills", help="List, validate and show SKILL.md skills")
    skills_sub = skills.add_subparsers(dest="skills_command", required=True)
    skills_sub.add_parser("list", parents=[workspace], help="List discovered skills")
    skills_sub.add_parser("validate", parents=[workspace], help="Validate skill structure")
    show = skills_sub.add_parser("show", parents=[workspace], help="Print a skill as prompt text")
    show.add_argument("name", help="Skill name")
    show.add_argument("--references", action="store_true", help="Append files under references/")

    subparsers.add_parser("validate-config", parents=[workspace], help="Validate scribe.yaml")

    return parser


_HANDLERS = {
    "report": handlers.handle_report,
    "commit-lint": handlers.handle_commit_lint,
    "jsdoc": handlers.handle_jsdoc,
    "skills": handlers.handle_skills,
    "validate-config": handlers.handle_validate_config,
}


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    handler = _HANDLERS.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")
    return handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
