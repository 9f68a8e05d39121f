"""Tests for the per-tool build-log parsers."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from scribe.buildlog.eslint import EslintParser
from scribe.buildlog.generic import GenericParser
from scribe.buildlog.typescript import TypeScriptParser
from scribe.buildlog.vite import ViteParser
from scribe.buildlog.webpack import WebpackParser


def test_tsc_plain_output(read_log: Callable[[str], str]) -> None:
    parsed = TypeScriptParser().parse(read_log("tsc.log"))

    assert [d.code for d in parsed.diagnostics] == ["TS2322", "TS2304", "TS2307", "TS2345"]
    first = parsed.diagnostics[0]
    assert (first.file, first.line, first.column, first.severity) == ("src/app.ts", 12, 5, "error")
    assert parsed.reported_errors == 4


def test_tsc_message_chain_is_appended(read_log: Callable[[str], str]) -> None:
    parsed = TypeScriptParser().parse(read_log("tsc.log"))

    chained = parsed.diagnostics[3]
    assert chained.message.splitlines() == [
        "Argument of type 'number' is not assignable to parameter of type 'string'.",
        "Type 'number' is not assignable to type 'string'.",
    ]


def test_tsc_pretty_output_skips_code_frame(read_log: Callable[[str], str]) -> None:
    parsed = TypeScriptParser().parse(read_log("tsc-pretty.log"))

    assert len(parsed.diagnostics) == 1
    diagnostic = parsed.diagnostics[0]
    assert diagnostic.location == "src/app.ts:12:5"
    assert "\n" not in diagnostic.message
    assert parsed.reported_errors == 1


def test_tsc_pretty_output_with_ansi_colors() -> None:
    text = (
        "\x1b[96msrc/app.ts\x1b[0m:\x1b[93m3\x1b[0m:\x1b[93m1\x1b[0m - "
        "\x1b[91merror\x1b[0m\x1b[90m TS1005: \x1b[0m';' expected.\r\n"
    )

    parsed = TypeScriptParser().parse(text)

    assert len(parsed.diagnostics) == 1
    assert parsed.diagnostics[0].code == "TS1005"
    assert parsed.diagnostics[0].message == "';' expected."


def test_tsc_global_and_watch_output() -> None:
    text = (
        "[10:01:02 AM] Starting compilation in watch mode...\n"
        "error TS5023: Unknown compiler option 'foo'.\n"
        "[10:01:04 AM] Found 0 errors. Watching for file changes.\n"
    )

    parsed = TypeScriptParser().parse(text)

    assert len(parsed.diagnostics) == 1
    assert parsed.diagnostics[0].file is None
    assert parsed.diagnostics[0].code == "TS5023"
    assert parsed.reported_errors == 0


def test_tsc_watch_cycle_discards_earlier_diagnostics() -> None:
    text = (
        "[10:01:02 AM] Starting compilation in watch mode...\n"
        "src/app.ts(3,7): error TS2322: Type 'string' is not assignable to type 'number'.\n"
        "[10:01:04 AM] Found 1 error. Watching for file changes.\n"
        "[10:02:10 AM] File change detected. Starting incremental compilation...\n"
        "[10:02:11 AM] Found 0 errors. Watching for file changes.\n"
    )

    parsed = TypeScriptParser().parse(text)

    assert parsed.diagnostics == []
    assert parsed.reported_errors == 0


def test_eslint_stylish_output(read_log: Callable[[str], str]) -> None:
    parsed = EslintParser().parse(read_log("eslint-stylish.log"))

    rows = [(d.file, d.line, d.column, d.severity, d.code) for d in parsed.diagnostics]
    assert rows == [
        ("/app/src/index.js", 1, 10, "error", "no-unused-vars"),
        ("/app/src/index.js", 4, 3, "warning", "no-console"),
        ("/app/src/index.js", 9, 1, "error", "no-undef"),
        ("/app/src/util.js", 2, 7, "error", None),
    ]
    assert parsed.diagnostics[3].message == "Parsing error: Unexpected token )"
    assert (parsed.reported_errors, parsed.reported_warnings) == (3, 1)
    assert parsed.notes and "potentially fixable" in parsed.notes[0]


@pytest.mark.parametrize(
    "line",
    [
        "/app/src/a.js:3:5: 'x' is not defined. [Error/no-undef]",
        "/app/src/a.js: line 3, col 5, Error - 'x' is not defined. (no-undef)",
    ],
    ids=["unix", "compact"],
)
def test_eslint_single_line_formatters(line: str) -> None:
    parsed = EslintParser().parse(line + "\n")

    assert len(parsed.diagnostics) == 1
    diagnostic = parsed.diagnostics[0]
    assert (diagnostic.file, diagnostic.line, diagnostic.column) == ("/app/src/a.js", 3, 5)
    assert diagnostic.severity == "error"
    assert diagnostic.code == "no-undef"
    assert diagnostic.message == "'x' is not defined."


def test_webpack_blocks_assets_and_summary(read_log: Callable[[str], str]) -> None:
    parsed = WebpackParser().parse(read_log("webpack.log"))

    assert [(d.severity, d.code) for d in parsed.diagnostics] == [
        ("warning", "asset-size-limit"),
        ("error", "module-not-found"),
        ("error", "TS2322"),
    ]
    size, missing, typed = parsed.diagnostics
    assert size.file is None
    assert size.message.startswith("asset size limit:")
    assert (missing.file, missing.line, missing.column) == ("./src/index.js", 3, 0)
    assert missing.message == "Module not found: Error: Can't resolve './missing' in '/app/src'"
    assert typed.location == "src/components/Button.tsx:14:7"
    assert typed.message == "Type 'string' is not assignable to type 'number'."

    assert (parsed.reported_errors, parsed.reported_warnings) == (2, 1)
    assert parsed.failure_marker is True
    assert parsed.duration_seconds == pytest.approx(2.345)
    assert [(a.name, a.size) for a in parsed.artifacts] == [("main.js", "1.2 MiB"), ("index.html", "312 bytes")]


def test_webpack_entrypoint_size_limit() -> None:
    text = (
        "WARNING in entrypoint size limit: The following entrypoint(s) combined asset size exceeds "
        "the recommended limit (244 KiB). This can impact web performance.\n"
        "Entrypoints:\n"
        "  main (1.2 MiB)\n"
        "      main.js\n"
        "\n"
        "webpack 5.88.2 compiled with 1 warning in 900 ms\n"
    )

    parsed = WebpackParser().parse(text)

    (diagnostic,) = parsed.diagnostics
    assert (diagnostic.severity, diagnostic.code, diagnostic.file) == ("warning", "entrypoint-size-limit", None)
    assert diagnostic.message.startswith("entrypoint size limit:")
    assert (parsed.reported_errors, parsed.reported_warnings) == (0, 1)
    assert parsed.failure_marker is False


def test_webpack_ts_loader_block_uses_tsl_location() -> None:
    text = (
        "ERROR in /app/src/index.ts\n"
        "./src/index.ts 3:7-8\n"
        "[tsl] ERROR in /app/src/index.ts(3,7)\n"
        "      TS2322: Type 'string' is not assignable to type 'number'.\n"
    )

    parsed = WebpackParser().parse(text)

    assert len(parsed.diagnostics) == 1
    diagnostic = parsed.diagnostics[0]
    assert (diagnostic.file, diagnostic.line, diagnostic.column) == ("/app/src/index.ts", 3, 7)
    assert diagnostic.code == "TS2322"


def test_webpack_module_build_failed_joins_detail_line() -> None:
    text = (
        "ERROR in ./src/a.js\n"
        "Module build failed (from ./node_modules/babel-loader/lib/index.js):\n"
        "SyntaxError: /app/src/a.js: Unexpected token (3:5)\n"
        "\n"
        "webpack 5.88.2 compiled with 1 error in 80 ms\n"
    )

    parsed = WebpackParser().parse(text)

    diagnostic = parsed.diagnostics[0]
    assert diagnostic.code == "module-build-failed"
    assert diagnostic.message.endswith("SyntaxError: /app/src/a.js: Unexpected token (3:5)")
    assert parsed.duration_seconds == pytest.approx(0.08)


def test_webpack_compiled_successfully() -> None:
    parsed = WebpackParser().parse("webpack 5.88.2 compiled successfully in 1.5 s\n")

    assert parsed.reported_errors == 0
    assert parsed.duration_seconds == pytest.approx(1.5)


def test_vite_success_output(read_log: Callable[[str], str]) -> None:
    parsed = ViteParser().parse(read_log("vite-success.log"))

    assert parsed.diagnostics == []
    assert parsed.modules_transformed == 34
    assert parsed.duration_seconds == pytest.approx(1.24)
    assert [(a.name, a.size, a.gzip_size) for a in parsed.artifacts][-1] == (
        "dist/assets/index-BvX1bE2c.js",
        "143.36 kB",
        "46.07 kB",
    )
    assert len(parsed.artifacts) == 3


def test_vite_unresolved_import(read_log: Callable[[str], str]) -> None:
    parsed = ViteParser().parse(read_log("vite-unresolved.log"))

    assert parsed.failure_marker is True
    assert parsed.duration_seconds == pytest.approx(0.345)
    assert len(parsed.diagnostics) == 1
    diagnostic = parsed.diagnostics[0]
    assert diagnostic.code == "unresolved-import"
    assert diagnostic.file == "/app/src/main.ts"
    assert diagnostic.message.startswith('Rollup failed to resolve import "lodash-es"')


def test_vite_esbuild_transform_failure(read_log: Callable[[str], str]) -> None:
    parsed = ViteParser().parse(read_log("vite-esbuild.log"))

    assert len(parsed.diagnostics) == 1
    diagnostic = parsed.diagnostics[0]
    assert diagnostic.code == "transform-failed"
    assert diagnostic.location == "/app/src/main.ts:3:10"
    assert diagnostic.message == 'Expected ";" but found "world"'


def test_vite_plugin_error_and_file_refinement() -> None:
    text = (
        "error during build:\n"
        "[plugin:vite:vue] Unexpected closing tag\n"
        "file: /app/src/App.vue:12:3\n"
    )

    parsed = ViteParser().parse(text)

    diagnostic = parsed.diagnostics[0]
    assert diagnostic.code == "vite:vue"
    assert diagnostic.location == "/app/src/App.vue:12:3"


def test_vite_generic_error_after_error_during_build() -> None:
    parsed = ViteParser().parse("error during build:\nRollupError: Could not resolve entry module (index.html).\n")

    assert [d.code for d in parsed.diagnostics] == ["build-error"]
    assert parsed.diagnostics[0].message == "Could not resolve entry module (index.html)."


def test_vite_chunk_size_warning() -> None:
    parsed = ViteParser().parse("(!) Some chunks are larger than 500 kB after minification. Consider:\n")

    assert [(d.severity, d.code) for d in parsed.diagnostics] == [("warning", "vite-warning")]


def test_generic_gcc_style_output(read_log: Callable[[str], str]) -> None:
    parsed = GenericParser().parse(read_log("generic.log"))

    rows = [(d.file, d.line, d.column, d.severity) for d in parsed.diagnostics]
    assert rows == [
        ("src/main.c", 10, 5, "error"),
        ("src/main.c", 4, 1, "warning"),
        ("src/util.c", 7, None, "info"),
    ]
