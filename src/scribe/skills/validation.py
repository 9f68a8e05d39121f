"""Structural checks for skill directories."""

from __future__ import annotations

import difflib
import logging
from pathlib import Path

from scribe.config import ScribeConfig
from scribe.constants.discovery import REFERENCES_DIRNAME
from scribe.constants.parsing import SKILL_DESCRIPTION_MAX_LENGTH, SKILL_NAME_MAX_LENGTH, SKILL_NAME_PATTERN
from scribe.constants.skills import (
    SKILL_SUGGESTION_CUTOFF,
    SKILL_SUGGESTION_LIMIT,
    SKL000,
    SKL001,
    SKL002,
    SKL003,
    SKL004,
    SKL005,
    SKL006,
    SKL007,
    SKL008,
    SKL009,
    SKL010,
)
from scribe.exceptions import SkillNotFoundError, SkillParseError
from scribe.model import Diagnostic, SkillDocument, sort_diagnostics
from scribe.skills.discovery import derive_skill_name, discover_skill_files, stable_path_key
from scribe.skills.parser import parse_skill_file
from scribe.types import Severity

logger = logging.getLogger(__name__)


def _diagnostic(severity: Severity, code: str, message: str, file: str, line: int | None = None) -> Diagnostic:
    return Diagnostic(tool="skills", severity=severity, code=code, message=message, file=file, line=line)


def validate_skill(doc: SkillDocument, root: Path) -> list[Diagnostic]:
    """Check one parsed skill against the SKILL.md authoring rules."""
    rel = stable_path_key(doc.file_path.resolve(), root.resolve())
    diagnostics: list[Diagnostic] = []

    if doc.frontmatter is None:
        diagnostics.append(_diagnostic("error", SKL001, "SKILL.md has no YAML frontmatter", rel, 1))
    else:
        name = doc.name
        if name is None:
            diagnostics.append(_diagnostic("error", SKL002, "frontmatter is missing `name`", rel, 1))
        else:
            if len(name) > SKILL_NAME_MAX_LENGTH or not SKILL_NAME_PATTERN.match(name):
                diagnostics.append(
                    _diagnostic(
                        "error",
                        SKL003,
                        f"name {name!r} must be lowercase words joined by single hyphens, "
                        f"at most {SKILL_NAME_MAX_LENGTH} characters",
                        rel,
                        1,
                    )
                )
            if doc.directory.resolve() != root.resolve() and name != doc.directory.name:
                diagnostics.append(
                    _diagnostic(
                        "warning",
                        SKL006,
                        f"name {name!r} does not match directory {doc.directory.name!r}",
                        rel,
                        1,
                    )
                )

        description = doc.description
        if description is None:
            diagnostics.append(_diagnostic("error", SKL004, "frontmatter is missing `description`", rel, 1))
        elif len(description) > SKILL_DESCRIPTION_MAX_LENGTH:
            diagnostics.append(
                _diagnostic(
                    "error",
                    SKL005,
                    f"description is {len(description)} characters; limit is {SKILL_DESCRIPTION_MAX_LENGTH}",
                    rel,
                    1,
                )
            )

    if not doc.body:
        diagnostics.append(_diagnostic("warning", SKL009, "SKILL.md has no instructions after the frontmatter", rel))

    linked: set[Path] = set()
    for link in doc.links:
        target = (doc.directory / link.target).resolve()
        linked.add(target)
        if not target.exists():
            diagnostics.append(
                _diagnostic("error", SKL007, f"link target {link.target!r} does not exist", rel, link.line)
            )

    for reference in doc.references:
        if reference.path.resolve() not in linked:
            diagnostics.append(
                _diagnostic(
                    "info",
                    SKL008,
                    f"{REFERENCES_DIRNAME}/{reference.name} is never linked from SKILL.md",
                    rel,
                )
            )

    return diagnostics


def load_skills(root: Path, config: ScribeConfig) -> tuple[list[SkillDocument], list[Diagnostic]]:
    """Discover and parse every skill; parse failures come back as SKL000 diagnostics."""
    documents: list[SkillDocument] = []
    failures: list[Diagnostic] = []
    resolved_root = root.resolve()

    for path in discover_skill_files(resolved_root, config.skill_globs, config.max_file_mb):
        try:
            documents.append(parse_skill_file(path))
        except SkillParseError as exc:
            logger.warning("%s", exc)
            failures.append(_diagnostic("error", SKL000, str(exc), stable_path_key(path, resolved_root)))

    return documents, failures


def validate_skills(root: Path, config: ScribeConfig) -> list[Diagnostic]:
    """Validate every skill under *root* and flag duplicate declared names."""
    documents, diagnostics = load_skills(root, config)
    resolved_root = root.resolve()

    files_by_name: dict[str, list[str]] = {}
    for doc in documents:
        diagnostics.extend(validate_skill(doc, resolved_root))
        if doc.name:
            files_by_name.setdefault(doc.name, []).append(stable_path_key(doc.file_path, resolved_root))

    for name, files in sorted(files_by_name.items()):
        if len(files) < 2:
            continue
        for file in files:
            others = ", ".join(f for f in files if f != file)
            diagnostics.append(_diagnostic("error", SKL010, f"skill name {name!r} is also declared by {others}", file, 1))

    return sort_diagnostics(diagnostics)


def skill_lookup_name(doc: SkillDocument, root: Path) -> str:
    return derive_skill_name(doc.file_path, root, declared_name=doc.name)


def find_skill(root: Path, config: ScribeConfig, name: str) -> SkillDocument:
    """Return the skill whose lookup name equals *name*."""
    documents, _ = load_skills(root, config)
    wanted = name.strip().lower()
    names: list[str] = []
    for doc in documents:
        lookup = skill_lookup_name(doc, root)
        if lookup == wanted:
            return doc
        names.append(lookup)

    suggestions = difflib.get_close_matches(wanted, names, n=SKILL_SUGGESTION_LIMIT, cutoff=SKILL_SUGGESTION_CUTOFF)
    hint = f" (did you mean: {', '.join(suggestions)}?)" if suggestions else ""
    raise SkillNotFoundError(f"No skill named {name!r} under {root}{hint}")
