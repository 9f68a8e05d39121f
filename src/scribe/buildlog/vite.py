"""Vite (Rollup + esbuild) build output parser."""

from __future__ import annotations

from dataclasses import replace

from scribe.buildlog.base import BuildLogParser, ParsedLog, optional_int, to_seconds
from scribe.constants.buildlog import (
    CODE_BUILD_ERROR,
    CODE_TRANSFORM_FAILED,
    CODE_UNRESOLVED_IMPORT,
    CODE_VITE_WARNING,
    DETECT_BUNDLER,
    DETECT_MEDIUM,
    DETECT_STRONG,
    LOCATION_IN_TEXT_PATTERN,
    TOOL_VITE,
    VITE_ARTIFACT_PATTERN,
    VITE_BANNER_PATTERN,
    VITE_BUILD_FAILED_PATTERN,
    VITE_BUILT_PATTERN,
    VITE_ERROR_DURING_BUILD,
    VITE_ESBUILD_ROW_PATTERN,
    VITE_FILE_LINE_PATTERN,
    VITE_GENERIC_ERROR_PATTERN,
    VITE_PLUGIN_ERROR_PATTERN,
    VITE_TRANSFORM_FAILED_PATTERN,
    VITE_TRANSFORMED_PATTERN,
    VITE_UNRESOLVED_PATTERN,
    VITE_WARNING_PATTERN,
)
from scribe.model import Artifact, Diagnostic


class ViteParser(BuildLogParser):
    """Parses ``vite build`` progress, artifact rows and the ``error during build`` section."""

    tool = TOOL_VITE

    def detect(self, text: str) -> int:
        lines = [line.strip() for line in text.splitlines()]
        if any(VITE_BANNER_PATTERN.match(line) for line in lines):
            return DETECT_BUNDLER
        if any(VITE_TRANSFORMED_PATTERN.match(line) or VITE_BUILD_FAILED_PATTERN.match(line) for line in lines):
            return DETECT_STRONG
        if VITE_ERROR_DURING_BUILD in text or "[vite" in text:
            return DETECT_MEDIUM
        return 0

    def parse_lines(self, lines: list[str], result: ParsedLog) -> None:
        in_error = False
        transform_plugin: str | None = None
        last_error: int | None = None

        for number, raw in enumerate(lines, start=1):
            stripped = raw.strip()
            if not stripped:
                transform_plugin = None
                continue

            transformed = VITE_TRANSFORMED_PATTERN.match(stripped)
            if transformed:
                result.modules_transformed = int(transformed.group("count"))
                continue

            built = VITE_BUILT_PATTERN.match(stripped)
            if built:
                result.duration_seconds = to_seconds(built.group("duration"), built.group("unit"))
                continue

            failed = VITE_BUILD_FAILED_PATTERN.match(stripped)
            if failed:
                result.failure_marker = True
                result.duration_seconds = to_seconds(failed.group("duration"), failed.group("unit"))
                continue

            if stripped.lower().startswith(VITE_ERROR_DURING_BUILD):
                in_error = True
                result.failure_marker = True
                continue

            warning = VITE_WARNING_PATTERN.match(stripped)
            if warning:
                message = warning.group("message").strip()
                file, line, column = _location_in(message)
                result.diagnostics.append(
                    Diagnostic(
                        tool=self.tool,
                        severity="warning",
                        message=message,
                        file=file,
                        line=line,
                        column=column,
                        code=CODE_VITE_WARNING,
                        source_line=number,
                    )
                )
                continue

            unresolved = VITE_UNRESOLVED_PATTERN.search(stripped)
            if unresolved:
                message = stripped.split("]", 1)[-1].lstrip(": ").strip()
                result.diagnostics.append(
                    Diagnostic(
                        tool=self.tool,
                        severity="error",
                        message=message,
                        file=unresolved.group("file"),
                        code=CODE_UNRESOLVED_IMPORT,
                        source_line=number,
                    )
                )
                last_error = len(result.diagnostics) - 1
                continue

            transform = VITE_TRANSFORM_FAILED_PATTERN.search(stripped)
            if transform:
                transform_plugin = transform.group("plugin")
                continue

            row = VITE_ESBUILD_ROW_PATTERN.match(stripped)
            if row:
                result.diagnostics.append(
                    Diagnostic(
                        tool=self.tool,
                        severity="error" if row.group("severity") == "ERROR" else "warning",
                        message=row.group("message").strip(),
                        file=row.group("file"),
                        line=int(row.group("line")),
                        column=int(row.group("column")),
                        code=CODE_TRANSFORM_FAILED if transform_plugin else None,
                        source_line=number,
                    )
                )
                last_error = len(result.diagnostics) - 1
                continue

            artifact = VITE_ARTIFACT_PATTERN.match(stripped)
            if artifact and not in_error:
                result.artifacts.append(
                    Artifact(name=artifact.group("name"), size=artifact.group("size"), gzip_size=artifact.group("gzip"))
                )
                continue

            if not in_error:
                continue

            file_line = VITE_FILE_LINE_PATTERN.match(stripped)
            if file_line:
                if last_error is not None:
                    previous = result.diagnostics[last_error]
                    result.diagnostics[last_error] = replace(
                        previous,
                        file=file_line.group("file"),
                        line=optional_int(file_line.group("line")) or previous.line,
                        column=optional_int(file_line.group("column")) or previous.column,
                    )
                continue

            plugin = VITE_PLUGIN_ERROR_PATTERN.match(stripped)
            if plugin:
                message = plugin.group("message").strip()
                file, line, column = _location_in(message)
                result.diagnostics.append(
                    Diagnostic(
                        tool=self.tool,
                        severity="error",
                        message=message,
                        file=file,
                        line=line,
                        column=column,
                        code=plugin.group("plugin").strip(),
                        source_line=number,
                    )
                )
                last_error = len(result.diagnostics) - 1
                continue

            generic = VITE_GENERIC_ERROR_PATTERN.match(stripped)
            if generic and last_error is None:
                message = generic.group("message").strip()
                file, line, column = _location_in(message)
                result.diagnostics.append(
                    Diagnostic(
                        tool=self.tool,
                        severity="error",
                        message=message,
                        file=file,
                        line=line,
                        column=column,
                        code=CODE_BUILD_ERROR,
                        source_line=number,
                    )
                )
                last_error = len(result.diagnostics) - 1


def _location_in(message: str) -> tuple[str | None, int | None, int | None]:
    match = LOCATION_IN_TEXT_PATTERN.search(message)
    if not match:
        return None, None, None
    return match.group("file"), int(match.group("line")), int(match.group("column"))
