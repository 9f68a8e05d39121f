"""Parser for SKILL.md files with YAML frontmatter."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from scribe.constants.discovery import REFERENCE_SUFFIX, REFERENCES_DIRNAME
from scribe.constants.parsing import (
    FENCED_CODE_BLOCK_PATTERN,
    FRONTMATTER_ALT_DELIMITER,
    FRONTMATTER_DELIMITER,
    HEADING_PATTERN,
    MARKDOWN_LINK_PATTERN,
    URL_SCHEME_PATTERN,
)
from scribe.exceptions import SkillParseError
from scribe.model import SkillDocument, SkillLink, SkillReference, SkillSection


def parse_skill_file(path: Path) -> SkillDocument:
    """Parse a SKILL.md file into frontmatter, body, headings, links and references."""
    try:
        raw_text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SkillParseError(f"{path} is not valid UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise SkillParseError(f"Cannot read {path}: {exc}") from exc

    normalized = raw_text.lstrip("\ufeff")
    lines = normalized.splitlines()

    frontmatter: dict[str, Any] | None = None
    body_lines = lines

    if lines and lines[0].strip() == FRONTMATTER_DELIMITER:
        frontmatter_end = _find_frontmatter_end(lines)
        if frontmatter_end is None:
            raise SkillParseError(f"Unterminated frontmatter block in {path}")

        frontmatter_text = "\n".join(lines[1:frontmatter_end])
        try:
            frontmatter_payload = yaml.safe_load(frontmatter_text) if frontmatter_text.strip() else None
        except yaml.YAMLError as exc:
            raise SkillParseError(f"Failed to parse frontmatter in {path}: {exc}") from exc

        if frontmatter_payload is None:
            frontmatter = None
        elif isinstance(frontmatter_payload, dict):
            frontmatter = frontmatter_payload
        else:
            raise SkillParseError(f"Frontmatter in {path} must be a YAML mapping")

        body_lines = lines[frontmatter_end + 1 :]

    body_start = len(lines) - len(body_lines) + 1
    sections, links = _scan_body(body_lines, body_start)

    return SkillDocument(
        file_path=path,
        raw_text=raw_text,
        frontmatter=frontmatter,
        body="\n".join(body_lines).strip(),
        body_start_line=body_start,
        sections=sections,
        links=links,
        references=collect_references(path.parent),
    )


def collect_references(skill_dir: Path) -> tuple[SkillReference, ...]:
    """List ``references/*.md`` files of a skill directory, sorted by name."""
    references_dir = skill_dir / REFERENCES_DIRNAME
    if not references_dir.is_dir():
        return ()

    references: list[SkillReference] = []
    for path in sorted(references_dir.iterdir(), key=lambda p: p.name):
        if not path.is_file() or path.suffix.lower() != REFERENCE_SUFFIX:
            continue
        references.append(SkillReference(name=path.name, path=path, title=_first_title(path)))
    return tuple(references)


def _scan_body(body_lines: list[str], body_start: int) -> tuple[tuple[SkillSection, ...], tuple[SkillLink, ...]]:
    sections: list[SkillSection] = []
    links: list[SkillLink] = []
    active_fence_char: str | None = None

    for offset, line in enumerate(body_lines):
        index = body_start + offset
        stripped = line.strip()
        fence_char = _extract_fence_char(stripped)
        if fence_char is not None:
            if active_fence_char is None:
                active_fence_char = fence_char
            elif fence_char == active_fence_char:
                active_fence_char = None
            continue
        if active_fence_char is not None or not stripped:
            continue

        heading = HEADING_PATTERN.match(stripped)
        if heading:
            sections.append(SkillSection(heading=heading.group(2), level=len(heading.group(1)), line=index))

        for match in MARKDOWN_LINK_PATTERN.finditer(line):
            target = _normalize_link_target(match.group(1))
            if target:
                links.append(SkillLink(target=target, line=index))

    return tuple(sections), tuple(links)


def _normalize_link_target(raw_target: str) -> str | None:
    """Drop URLs and pure anchors; strip fragments and queries from relative paths."""
    if raw_target.startswith("#") or URL_SCHEME_PATTERN.match(raw_target):
        return None
    target = raw_target.split("#", 1)[0].split("?", 1)[0]
    return target or None


def _find_frontmatter_end(lines: list[str]) -> int | None:
    for index in range(1, len(lines)):
        if lines[index].strip() in {FRONTMATTER_DELIMITER, FRONTMATTER_ALT_DELIMITER}:
            return index
    return None


def _extract_fence_char(line: str) -> str | None:
    match = FENCED_CODE_BLOCK_PATTERN.match(line)
    if not match:
        return None
    return match.group(1)[0]


def _first_title(path: Path) -> str | None:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    for line in text.splitlines():
        if line.startswith("# "):
            return line[2:].strip() or None
    return None
