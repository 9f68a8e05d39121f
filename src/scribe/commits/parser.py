"""Split a commit message into Conventional Commits parts."""

from __future__ import annotations

from pathlib import Path

from scribe.constants.commits import FOOTER_PATTERN, HEADER_PATTERN, SCISSORS_PATTERN
from scribe.exceptions import CommitParseError
from scribe.io import read_text_input
from scribe.model import CommitFooter, CommitMessage


def read_commit_message(path: Path | None = None) -> str:
    """Read a commit message file, or stdin when *path* is None or ``-``."""
    try:
        return read_text_input(path)
    except OSError as exc:
        raise CommitParseError(f"Cannot read commit message {path}: {exc}") from exc


def clean_message(text: str) -> list[str]:
    """Apply git's ``--cleanup=strip`` rules: drop comments, scissors tail and outer blank lines."""
    lines: list[str] = []
    for raw in text.replace("\r\n", "\n").split("\n"):
        if SCISSORS_PATTERN.match(raw):
            break
        if raw.startswith("#"):
            continue
        lines.append(raw.rstrip())

    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def _paragraphs(lines: list[str], start: int) -> list[tuple[int, int]]:
    """Return ``(first, end)`` index spans of blank-line separated paragraphs from *start*."""
    spans: list[tuple[int, int]] = []
    first: int | None = None
    for index in range(start, len(lines)):
        if lines[index].strip():
            if first is None:
                first = index
        elif first is not None:
            spans.append((first, index))
            first = None
    if first is not None:
        spans.append((first, len(lines)))
    return spans


def _parse_footers(lines: list[str], first: int, end: int) -> tuple[CommitFooter, ...] | None:
    """Parse ``lines[first:end]`` as a footer block, or return None when it is not one."""
    footers: list[CommitFooter] = []
    for index in range(first, end):
        line = lines[index]
        match = FOOTER_PATTERN.match(line)
        if match:
            footers.append(
                CommitFooter(token=match.group("token"), value=match.group("value").strip(), line=index + 1)
            )
            continue
        if footers and line[:1].isspace():
            previous = footers[-1]
            value = f"{previous.value}\n{line.strip()}".strip()
            footers[-1] = CommitFooter(token=previous.token, value=value, line=previous.line)
            continue
        return None
    return tuple(footers)


def parse_commit_message(text: str) -> CommitMessage:
    """Parse *text* into a :class:`CommitMessage`.

    A header that is not in ``type(scope)!: description`` form still
    parses; ``type`` is then None.
    """
    lines = clean_message(text)
    if not lines:
        return CommitMessage(raw=text, header="", lines=())

    header = lines[0]
    match = HEADER_PATTERN.match(header)

    footers: tuple[CommitFooter, ...] = ()
    body_end = len(lines)
    paragraphs = _paragraphs(lines, 1)
    if paragraphs:
        first, end = paragraphs[-1]
        parsed = _parse_footers(lines, first, end)
        if parsed is not None:
            footers = parsed
            body_end = first

    body = "\n".join(lines[1:body_end]).strip("\n") or None

    return CommitMessage(
        raw=text,
        header=header,
        type=match.group("type") if match else None,
        scope=match.group("scope") if match else None,
        description=(match.group("description") or "").strip() if match else None,
        bang=bool(match and match.group("breaking")),
        body=body,
        footers=footers,
        lines=tuple(lines),
    )
