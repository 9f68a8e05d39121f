"""JSDoc coverage checks over JavaScript/TypeScript sources."""

from __future__ import annotations

import fnmatch
import logging
from pathlib import Path

from scribe.config import ScribeConfig
from scribe.constants.jsdoc import (
    DESTRUCTURED_ARRAY,
    DESTRUCTURED_OBJECT,
    JSD001,
    JSD002,
    JSD003,
    JSD004,
    JSD005,
    JSD006,
    UNTYPED_SOURCE_SUFFIXES,
)
from scribe.jsdoc.extractor import extract_functions
from scribe.model import Diagnostic, FunctionSignature, sort_diagnostics
from scribe.skills.discovery import stable_path_key
from scribe.types import JsDocConfig, Severity

logger = logging.getLogger(__name__)

TOOL_NAME = "jsdoc"
_DESTRUCTURED = frozenset({DESTRUCTURED_OBJECT, DESTRUCTURED_ARRAY})


def _param_root(name: str) -> str:
    return name.split(".", 1)[0].removesuffix("[]")


def _check_function(
    signature: FunctionSignature,
    file: str,
    config: JsDocConfig,
    untyped_source: bool,
) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []

    def report(severity: Severity, code: str, message: str, line: int | None = None) -> None:
        diagnostics.append(
            Diagnostic(
                tool=TOOL_NAME,
                severity=severity,
                code=code,
                message=message,
                file=file,
                line=line or signature.line,
            )
        )

    block = signature.jsdoc
    if block is None:
        report("warning", JSD001, f"function {signature.name!r} has no JSDoc comment")
        return diagnostics

    if not block.description:
        report("warning", JSD002, f"JSDoc for {signature.name!r} has no description", block.line)

    documented: list[str] = []
    for tag in block.params:
        if tag.name:
            root = _param_root(tag.name)
            if root not in documented:
                documented.append(root)

    identifiers = {param for param in signature.params if param not in _DESTRUCTURED}
    used: set[str] = set()
    for param in signature.params:
        if param in _DESTRUCTURED:
            free = next((name for name in documented if name not in used and name not in identifiers), None)
            if free is not None:
                used.add(free)
                continue
        elif param in documented:
            used.add(param)
            continue
        report("warning", JSD003, f"parameter {param} of {signature.name!r} is not documented")

    for name in documented:
        if name not in used:
            report("warning", JSD004, f"@param {name} does not match any parameter of {signature.name!r}", block.line)

    if config.require_returns and signature.returns_value and not block.has_returns:
        report("warning", JSD005, f"{signature.name!r} returns a value but has no @returns tag", block.line)

    if config.require_param_types and untyped_source:
        for tag in block.params:
            if tag.type is None:
                report("info", JSD006, f"@param {tag.name or '?'} has no {{type}}", block.line)

    return diagnostics


def check_source(path: Path | str, source: str, config: JsDocConfig | None = None) -> list[Diagnostic]:
    """Check every (exported) function in *source*; *path* is used for reporting and suffix rules."""
    config = config or JsDocConfig()
    file = path if isinstance(path, str) else path.as_posix()
    untyped_source = Path(file).suffix.lower() in UNTYPED_SOURCE_SUFFIXES

    diagnostics: list[Diagnostic] = []
    for signature in extract_functions(source):
        if config.exported_only and not signature.exported:
            continue
        diagnostics.extend(_check_function(signature, file, config, untyped_source))
    return diagnostics


def _is_excluded(relative: str, patterns: tuple[str, ...]) -> bool:
    for pattern in patterns:
        if fnmatch.fnmatch(relative, pattern):
            return True
        # `**/` also matches at the root
        if pattern.startswith("**/") and fnmatch.fnmatch(relative, pattern[3:]):
            return True
    return False


def discover_sources(root: Path, config: ScribeConfig, paths: list[Path] | None = None) -> list[Path]:
    """Expand include globs under *root* (or the given *paths*) minus exclude globs and oversize files."""
    resolved_root = root.resolve()
    discovered: set[Path] = set()
    targets = paths or [resolved_root]

    for target in targets:
        target = target if target.is_absolute() else resolved_root / target
        if target.is_file():
            candidates = [target]
        else:
            candidates = [path for pattern in config.jsdoc.include for path in target.glob(pattern)]
        for path in candidates:
            if not path.is_file():
                continue
            relative = stable_path_key(path.resolve(), resolved_root)
            if _is_excluded(relative, config.jsdoc.exclude):
                continue
            try:
                size = path.stat().st_size
            except OSError as exc:
                logger.warning("Skipping unreadable source file %s: %s", path, exc)
                continue
            if size > config.max_file_bytes:
                logger.info("Skipping %s: larger than %d MB", path, config.max_file_mb)
                continue
            discovered.add(path.resolve())

    return sorted(discovered, key=lambda path: stable_path_key(path, resolved_root))


def check_tree(root: Path, config: ScribeConfig, paths: list[Path] | None = None) -> list[Diagnostic]:
    """Run :func:`check_source` over every discovered source file."""
    resolved_root = root.resolve()
    diagnostics: list[Diagnostic] = []
    for path in discover_sources(resolved_root, config, paths):
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Skipping %s: %s", path, exc)
            continue
        diagnostics.extend(check_source(stable_path_key(path, resolved_root), source, config.jsdoc))
    return sort_diagnostics(diagnostics)
