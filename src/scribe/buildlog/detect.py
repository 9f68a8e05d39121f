"""Parser registry and tool auto-detection."""

from __future__ import annotations

import logging

from scribe.buildlog.base import BuildLogParser, clean_log
from scribe.buildlog.eslint import EslintParser
from scribe.buildlog.generic import GenericParser
from scribe.buildlog.typescript import TypeScriptParser
from scribe.buildlog.vite import ViteParser
from scribe.buildlog.webpack import WebpackParser
from scribe.constants.buildlog import AUTO_TOOL, BUILD_TOOLS, TOOL_GENERIC
from scribe.exceptions import LogParseError

logger = logging.getLogger(__name__)

PARSERS: dict[str, BuildLogParser] = {
    parser.tool: parser
    for parser in (TypeScriptParser(), EslintParser(), WebpackParser(), ViteParser(), GenericParser())
}


def get_parser(tool: str) -> BuildLogParser:
    """Return the registered parser for *tool*."""
    parser = PARSERS.get(tool.strip().lower())
    if parser is None:
        raise LogParseError(f"Unknown build tool {tool!r}; expected one of: {', '.join(BUILD_TOOLS)}")
    return parser


def detect_tool(text: str) -> BuildLogParser:
    """Pick the parser with the highest detection score, falling back to ``generic``."""
    cleaned = clean_log(text)
    best = PARSERS[TOOL_GENERIC]
    best_score = 0
    for tool in BUILD_TOOLS:
        if tool == TOOL_GENERIC:
            continue
        score = PARSERS[tool].detect(cleaned)
        logger.debug("detect %s -> %d", tool, score)
        if score > best_score:
            best, best_score = PARSERS[tool], score
    return best


def resolve_parser(text: str, tool: str | None = None) -> BuildLogParser:
    if tool is None or tool == AUTO_TOOL:
        return detect_tool(text)
    return get_parser(tool)
