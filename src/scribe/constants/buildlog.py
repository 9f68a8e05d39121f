"""Patterns and lookup tables for build-log parsing."""

from __future__ import annotations

import re
from re import Pattern

ANSI_ESCAPE_PATTERN: Pattern[str] = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]|\x1b\][^\x07]*\x07")

TOOL_TSC: str = "tsc"
TOOL_ESLINT: str = "eslint"
TOOL_WEBPACK: str = "webpack"
TOOL_VITE: str = "vite"
TOOL_GENERIC: str = "generic"
BUILD_TOOLS: tuple[str, ...] = (TOOL_TSC, TOOL_ESLINT, TOOL_WEBPACK, TOOL_VITE, TOOL_GENERIC)
AUTO_TOOL: str = "auto"

# TypeScript compiler
TSC_PLAIN_PATTERN: Pattern[str] = re.compile(
    r"^(?P<file>[^\s(][^(]*?)\((?P<line>\d+),(?P<column>\d+)\):\s+"
    r"(?P<severity>error|warning|message)\s+(?P<code>TS\d+):\s*(?P<message>.*)$"
)
TSC_PRETTY_PATTERN: Pattern[str] = re.compile(
    r"^(?P<file>\S.*?):(?P<line>\d+):(?P<column>\d+)\s+-\s+"
    r"(?P<severity>error|warning|message)\s+(?P<code>TS\d+):\s*(?P<message>.*)$"
)
TSC_GLOBAL_PATTERN: Pattern[str] = re.compile(
    r"^(?P<severity>error|warning|message)\s+(?P<code>TS\d+):\s*(?P<message>.*)$"
)
TSC_SUMMARY_PATTERN: Pattern[str] = re.compile(r"Found (?P<count>\d+) errors?\b")
TSC_WATCH_PREFIX_PATTERN: Pattern[str] = re.compile(r"^\[[^\]]*\d{1,2}:\d{2}:\d{2}[^\]]*\]\s+")
TSC_WATCH_CYCLE_PATTERN: Pattern[str] = re.compile(
    r"^(?:Starting compilation in watch mode|File change detected\. Starting incremental compilation)"
)
TSC_CODE_FRAME_PATTERN: Pattern[str] = re.compile(r"^\d+\s")
TSC_UNDERLINE_PATTERN: Pattern[str] = re.compile(r"^\s*~+\s*$")
TSC_CONTINUATION_PATTERN: Pattern[str] = re.compile(r"^\s{2,}\S")
TSC_CODE_PATTERN: Pattern[str] = re.compile(r"\bTS\d{3,5}\b")

# ESLint
ESLINT_ROW_PATTERN: Pattern[str] = re.compile(
    r"^\s+(?P<line>\d+):(?P<column>\d+)\s+(?P<severity>error|warning)\s+"
    r"(?P<message>.+?)(?:\s{2,}(?P<rule>[@\w][\w@/.-]*))?\s*$"
)
ESLINT_FILE_HEADER_PATTERN: Pattern[str] = re.compile(
    r"^(?P<file>(?:[A-Za-z]:[\\/])?[^\s✖×:>][^:]*\.[A-Za-z0-9]+)\s*$"
)
ESLINT_SUMMARY_PATTERN: Pattern[str] = re.compile(
    r"^[✖×]\s+(?P<problems>\d+)\s+problems?\s+\("
    r"(?P<errors>\d+)\s+errors?,\s+(?P<warnings>\d+)\s+warnings?\)"
)
ESLINT_PLAIN_SUMMARY_PATTERN: Pattern[str] = re.compile(r"^(?P<problems>\d+)\s+problems?\s*$")
ESLINT_FIXABLE_PATTERN: Pattern[str] = re.compile(
    r"^\s*\d+\s+errors?\s+and\s+\d+\s+warnings?\s+potentially fixable"
)
ESLINT_UNIX_PATTERN: Pattern[str] = re.compile(
    r"^(?P<file>\S.*?):(?P<line>\d+):(?P<column>\d+):\s+(?P<message>.*?)\s+"
    r"\[(?P<severity>Error|Warning)(?:/(?P<rule>[^\]]+))?\]\s*$"
)
ESLINT_COMPACT_PATTERN: Pattern[str] = re.compile(
    r"^(?P<file>\S.*?):\s+line\s+(?P<line>\d+),\s+col\s+(?P<column>\d+),\s+"
    r"(?P<severity>Error|Warning)\s+-\s+(?P<message>.*?)(?:\s+\((?P<rule>[^()\s]+)\))?\s*$"
)

# Webpack
WEBPACK_BLOCK_HEADER_PATTERN: Pattern[str] = re.compile(r"^(?P<severity>ERROR|WARNING) in (?P<where>.+?)\s*$")
WEBPACK_WHERE_PATTERN: Pattern[str] = re.compile(
    r"^(?P<file>\S+?)"
    r"(?::(?P<line>\d+):(?P<column>\d+)"
    r"|\s+(?P<range_line>\d+):(?P<range_column>\d+)(?:-\d+(?::\d+)?)?"
    r"|\((?P<paren_line>\d+),(?P<paren_column>\d+)\))?$"
)
WEBPACK_TSL_PATTERN: Pattern[str] = re.compile(
    r"^\[tsl\]\s+(?:ERROR|WARNING)\s+in\s+(?P<file>.+?)\((?P<line>\d+),(?P<column>\d+)\)"
)
WEBPACK_TS_MESSAGE_PATTERN: Pattern[str] = re.compile(r"^\s*(?P<code>TS\d{3,5}):\s*(?P<message>.*)$")
WEBPACK_SUMMARY_PATTERN: Pattern[str] = re.compile(
    r"^webpack(?:\s+\d+\.\d+\.\d+\S*)?\s+compiled\s+(?P<outcome>successfully|with\s+.+?)"
    r"(?:\s+in\s+(?P<duration>\d+(?:\.\d+)?)\s*(?P<unit>ms|s))?\s*$"
)
WEBPACK_ERROR_COUNT_PATTERN: Pattern[str] = re.compile(r"(?P<count>\d+)\s+errors?\b")
WEBPACK_WARNING_COUNT_PATTERN: Pattern[str] = re.compile(r"(?P<count>\d+)\s+warnings?\b")
WEBPACK_ASSET_PATTERN: Pattern[str] = re.compile(
    r"^asset\s+(?P<name>\S+)\s+(?P<size>\d+(?:\.\d+)?\s+(?:bytes|[KMG]iB))"
)
WEBPACK_MODULE_NOT_FOUND: str = "Module not found"
WEBPACK_MODULE_BUILD_FAILED: str = "Module build failed"

# Vite
VITE_BANNER_PATTERN: Pattern[str] = re.compile(r"^vite v\d+\S*\s+building")
VITE_TRANSFORMED_PATTERN: Pattern[str] = re.compile(r"^[✓√]\s+(?P<count>\d+)\s+modules?\s+transformed")
VITE_ARTIFACT_PATTERN: Pattern[str] = re.compile(
    r"^(?P<name>\S+\.\w+)\s+(?P<size>\d[\d,]*(?:\.\d+)?\s*[kKMG]?B)"
    r"(?:\s+[│|]\s+gzip:\s+(?P<gzip>\d[\d,]*(?:\.\d+)?\s*[kKMG]?B))?"
)
VITE_BUILT_PATTERN: Pattern[str] = re.compile(r"^(?:[✓√]\s+)?built in (?P<duration>\d+(?:\.\d+)?)\s*(?P<unit>ms|s)")
VITE_BUILD_FAILED_PATTERN: Pattern[str] = re.compile(
    r"^[✗x×]\s+Build failed in (?P<duration>\d+(?:\.\d+)?)\s*(?P<unit>ms|s)"
)
VITE_ERROR_DURING_BUILD: str = "error during build:"
VITE_UNRESOLVED_PATTERN: Pattern[str] = re.compile(
    r'\[vite\]:?\s+Rollup failed to resolve import "(?P<target>[^"]+)" from "(?P<file>[^"]+)"'
)
VITE_TRANSFORM_FAILED_PATTERN: Pattern[str] = re.compile(
    r"\[(?P<plugin>[\w:.-]+)\]\s+Transform failed with (?P<count>\d+) errors?"
)
VITE_ESBUILD_ROW_PATTERN: Pattern[str] = re.compile(
    r"^(?P<file>\S.*?):(?P<line>\d+):(?P<column>\d+):\s+(?P<severity>ERROR|WARNING):\s+(?P<message>.*)$"
)
VITE_PLUGIN_ERROR_PATTERN: Pattern[str] = re.compile(
    r"^(?:\w*Error:\s+)?\[plugin:?\s*(?P<plugin>[^\]]+)\]\s+(?P<message>.+)$"
)
VITE_FILE_LINE_PATTERN: Pattern[str] = re.compile(
    r"^file:\s+(?P<file>.+?)(?::(?P<line>\d+)(?::(?P<column>\d+))?)?\s*$"
)
VITE_GENERIC_ERROR_PATTERN: Pattern[str] = re.compile(r"^(?:\w*Error|error):\s+(?P<message>.+)$")
VITE_WARNING_PATTERN: Pattern[str] = re.compile(r"^\(!\)\s+(?P<message>.+)$")
LOCATION_IN_TEXT_PATTERN: Pattern[str] = re.compile(
    r"(?P<file>(?:[A-Za-z]:)?[\w./\\@~-]+\.\w+):(?P<line>\d+):(?P<column>\d+)"
)

# GCC-style fallback
GENERIC_DIAGNOSTIC_PATTERN: Pattern[str] = re.compile(
    r"^(?P<file>\S.*?):(?P<line>\d+)(?::(?P<column>\d+))?:\s*"
    r"(?P<severity>fatal error|error|warning|note|info):\s*(?P<message>.*)$",
    re.IGNORECASE,
)

# Detector confidence ceilings.
# Bundler summaries outrank the linter and compiler output they embed.
DETECT_BUNDLER: int = 95
DETECT_STRONG: int = 90
DETECT_MEDIUM: int = 60
DETECT_WEAK: int = 30
DETECT_FALLBACK: int = 1

CODE_MODULE_NOT_FOUND: str = "module-not-found"
CODE_MODULE_BUILD_FAILED: str = "module-build-failed"
CODE_ASSET_SIZE_LIMIT: str = "asset-size-limit"
CODE_ENTRYPOINT_SIZE_LIMIT: str = "entrypoint-size-limit"
CODE_UNRESOLVED_IMPORT: str = "unresolved-import"
CODE_TRANSFORM_FAILED: str = "transform-failed"
CODE_VITE_WARNING: str = "vite-warning"
CODE_BUILD_ERROR: str = "build-error"

CATEGORY_MISSING_MODULE: str = "missing-module"
CATEGORY_UNDEFINED_NAME: str = "undefined-name"
CATEGORY_TYPE_MISMATCH: str = "type-mismatch"
CATEGORY_SYNTAX: str = "syntax"
CATEGORY_UNUSED_CODE: str = "unused-code"
CATEGORY_STYLE: str = "style"
CATEGORY_BUNDLE_SIZE: str = "bundle-size"
CATEGORY_OTHER: str = "other"

CATEGORY_BY_CODE: dict[str, str] = {
    "TS2307": CATEGORY_MISSING_MODULE,
    "TS2792": CATEGORY_MISSING_MODULE,
    CODE_MODULE_NOT_FOUND: CATEGORY_MISSING_MODULE,
    CODE_UNRESOLVED_IMPORT: CATEGORY_MISSING_MODULE,
    "import/no-unresolved": CATEGORY_MISSING_MODULE,
    "TS2304": CATEGORY_UNDEFINED_NAME,
    "TS2552": CATEGORY_UNDEFINED_NAME,
    "no-undef": CATEGORY_UNDEFINED_NAME,
    "TS2322": CATEGORY_TYPE_MISMATCH,
    "TS2345": CATEGORY_TYPE_MISMATCH,
    "TS2339": CATEGORY_TYPE_MISMATCH,
    "TS2741": CATEGORY_TYPE_MISMATCH,
    "TS7006": CATEGORY_TYPE_MISMATCH,
    "TS2769": CATEGORY_TYPE_MISMATCH,
    "TS1005": CATEGORY_SYNTAX,
    "TS1109": CATEGORY_SYNTAX,
    "TS1128": CATEGORY_SYNTAX,
    "TS1002": CATEGORY_SYNTAX,
    CODE_TRANSFORM_FAILED: CATEGORY_SYNTAX,
    "TS6133": CATEGORY_UNUSED_CODE,
    "TS6192": CATEGORY_UNUSED_CODE,
    "no-unused-vars": CATEGORY_UNUSED_CODE,
    "@typescript-eslint/no-unused-vars": CATEGORY_UNUSED_CODE,
    CODE_ASSET_SIZE_LIMIT: CATEGORY_BUNDLE_SIZE,
    CODE_ENTRYPOINT_SIZE_LIMIT: CATEGORY_BUNDLE_SIZE,
}

# Checked in order against the message when the code gives no answer.
CATEGORY_BY_MESSAGE: tuple[tuple[Pattern[str], str], ...] = (
    (re.compile(r"Cannot find module|Can't resolve|failed to resolve import", re.IGNORECASE), CATEGORY_MISSING_MODULE),
    (re.compile(r"Parsing error|Unexpected token|Expected \S+ but found", re.IGNORECASE), CATEGORY_SYNTAX),
    (re.compile(r"chunks are larger than|exceed the recommended size limit", re.IGNORECASE), CATEGORY_BUNDLE_SIZE),
)

CATEGORY_LABELS: dict[str, str] = {
    CATEGORY_MISSING_MODULE: "Missing or unresolved modules",
    CATEGORY_UNDEFINED_NAME: "Undefined names",
    CATEGORY_TYPE_MISMATCH: "Type errors",
    CATEGORY_SYNTAX: "Syntax errors",
    CATEGORY_UNUSED_CODE: "Unused code",
    CATEGORY_STYLE: "Lint style rules",
    CATEGORY_BUNDLE_SIZE: "Bundle size",
    CATEGORY_OTHER: "Other",
}

ROOT_CAUSES_DEFAULT_LIMIT: int = 3
