"""Patterns, defaults and check codes for JSDoc coverage."""

from __future__ import annotations

import re
from re import Pattern

FUNCTION_DECLARATION_PATTERN: Pattern[str] = re.compile(
    r"^[ \t]*(?P<export>export\s+(?:default\s+)?)?(?:async\s+)?function\s*\*?\s*(?P<name>[A-Za-z_$][\w$]*)"
    r"\s*(?:<[^>(]*>)?\s*\(",
    re.MULTILINE,
)
ARROW_FUNCTION_PATTERN: Pattern[str] = re.compile(
    r"^[ \t]*(?P<export>export\s+)?(?:const|let|var)\s+(?P<name>[A-Za-z_$][\w$]*)\s*(?::[^=]+)?=\s*"
    r"(?:async\s+)?(?:(?P<function>function\s*\*?\s*(?:[A-Za-z_$][\w$]*)?\s*\()"
    r"|(?P<arrow>(?:<[^>(]*>)?\s*\()|(?P<bare>[A-Za-z_$][\w$]*)\s*=>)",
    re.MULTILINE,
)
ARROW_AFTER_PARAMS_PATTERN: Pattern[str] = re.compile(r"\s*=>")
TYPE_WORD_PATTERN: Pattern[str] = re.compile(r"[\w$]+")
JSDOC_BLOCK_PATTERN: Pattern[str] = re.compile(r"/\*\*(?!/)(?P<body>.*?)\*/", re.DOTALL)
JSDOC_TAG_PATTERN: Pattern[str] = re.compile(r"^@(?P<tag>[A-Za-z]+)\b\s*(?P<rest>.*)$", re.DOTALL)
JSDOC_PARAM_NAME_PATTERN: Pattern[str] = re.compile(
    r"^(?:\[(?P<optional>[^\]=\s]+)(?:=[^\]]*)?\]|(?P<name>[^\s\[\]]+))\s*(?:-\s*)?(?P<description>.*)$",
    re.DOTALL,
)
RETURN_VALUE_PATTERN: Pattern[str] = re.compile(r"\breturn\b\s*(?![\s;}]|$)")
IDENTIFIER_PATTERN: Pattern[str] = re.compile(r"[A-Za-z_$][\w$]*")

TAG_ALIASES: dict[str, str] = {"return": "returns", "arg": "param", "argument": "param"}
# Words after which a return type annotation still expects a type.
TYPE_PREFIX_KEYWORDS: frozenset[str] = frozenset(
    {"asserts", "extends", "infer", "is", "keyof", "new", "readonly", "typeof", "unique"}
)

DEFAULT_JSDOC_INCLUDE: tuple[str, ...] = (
    "**/*.js",
    "**/*.jsx",
    "**/*.ts",
    "**/*.tsx",
    "**/*.mjs",
    "**/*.cjs",
)
DEFAULT_JSDOC_EXCLUDE: tuple[str, ...] = (
    "node_modules/**",
    "**/node_modules/**",
    "dist/**",
    "build/**",
    "**/*.d.ts",
)
UNTYPED_SOURCE_SUFFIXES: frozenset[str] = frozenset({".js", ".jsx", ".mjs", ".cjs"})
DESTRUCTURED_OBJECT: str = "{…}"
DESTRUCTURED_ARRAY: str = "[…]"

JSD001: str = "JSD001"  # missing JSDoc block
JSD002: str = "JSD002"  # missing description
JSD003: str = "JSD003"  # undocumented parameter
JSD004: str = "JSD004"  # documented parameter not in signature
JSD005: str = "JSD005"  # missing @returns
JSD006: str = "JSD006"  # @param without a type
