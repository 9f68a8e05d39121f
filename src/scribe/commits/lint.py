"""Conventional Commits lint rules."""

from __future__ import annotations

import logging
import re

from scribe.commits.parser import parse_commit_message
from scribe.constants.commits import (
    CC001,
    CC002,
    CC003,
    CC004,
    CC005,
    CC006,
    CC007,
    CC008,
    CC009,
    CC010,
    CC011,
    CC012,
    STDIN_SOURCE,
    URL_PATTERN,
)
from scribe.model import CommitMessage, Diagnostic
from scribe.types import CommitsConfig, Severity

logger = logging.getLogger(__name__)

TOOL_NAME = "commitlint"


def is_ignored(message: CommitMessage, config: CommitsConfig) -> bool:
    """Return True when the header matches one of the configured ignore patterns."""
    return any(re.search(pattern, message.header) for pattern in config.ignore_patterns)


def _split_scopes(scope: str) -> list[str]:
    return [part.strip() for part in re.split(r"[,/]", scope) if part.strip()]


def lint_commit_message(
    text: str,
    config: CommitsConfig | None = None,
    *,
    source: str = STDIN_SOURCE,
) -> list[Diagnostic]:
    """Lint one commit message and return its diagnostics in line order."""
    config = config or CommitsConfig()
    message = parse_commit_message(text)

    def report(severity: Severity, code: str, text: str, line: int = 1) -> None:
        diagnostics.append(
            Diagnostic(tool=TOOL_NAME, severity=severity, code=code, message=text, file=source, line=line)
        )

    diagnostics: list[Diagnostic] = []

    if not message.header.strip():
        report("error", CC012, "commit message is empty")
        return diagnostics

    if is_ignored(message, config):
        logger.debug("skipping ignored commit: %s", message.header)
        return diagnostics

    if len(message.header) > config.max_header_length:
        report(
            "error",
            CC003,
            f"header is {len(message.header)} characters; limit is {config.max_header_length}",
        )

    if not message.is_conventional:
        report("error", CC001, "header must look like `type(scope): description`")
    else:
        if message.type not in config.types:
            report("error", CC002, f"type {message.type!r} is not one of: {', '.join(config.types)}")

        scope = (message.scope or "").strip()
        if not scope:
            if config.require_scope:
                report("error", CC007, "a scope is required, e.g. `feat(parser): ...`")
        elif config.scopes:
            unknown = [part for part in _split_scopes(scope) if part not in config.scopes]
            if unknown:
                report("error", CC008, f"scope {', '.join(unknown)!r} is not one of: {', '.join(config.scopes)}")

        description = message.description or ""
        if not description:
            report("error", CC009, "description is empty")
        else:
            if description.endswith("."):
                report("warning", CC004, "description should not end with a period")
            if description[0].isupper():
                report("warning", CC005, "description should start with a lower-case letter")

    if len(message.lines) > 1 and message.lines[1].strip():
        report("error", CC006, "the header must be followed by a blank line", 2)

    for index, line in enumerate(message.lines[1:], start=2):
        if len(line) > config.max_body_line_length and not URL_PATTERN.search(line):
            report(
                "warning",
                CC010,
                f"line is {len(line)} characters; limit is {config.max_body_line_length}",
                index,
            )

    for footer in message.footers:
        if footer.is_breaking and not footer.value:
            report("error", CC011, f"{footer.token} footer needs a description", footer.line)

    diagnostics.sort(key=lambda d: (d.line or 0, d.code or ""))
    return diagnostics
