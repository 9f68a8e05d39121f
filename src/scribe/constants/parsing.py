"""Constants for SKILL.md parsing behavior."""

from __future__ import annotations

import re
from re import Pattern

FRONTMATTER_DELIMITER: str = "---"
# YAML allows "..." as an explicit document end marker.
FRONTMATTER_ALT_DELIMITER: str = "..."

FENCED_CODE_BLOCK_PATTERN: Pattern[str] = re.compile(r"^(`{3,}|~{3,})")
HEADING_PATTERN: Pattern[str] = re.compile(r"^(#{1,6})\s+(.+?)\s*#*\s*$")
MARKDOWN_LINK_PATTERN: Pattern[str] = re.compile(r"(?<!!)\[[^\]]*\]\(\s*<?([^)\s>]+)>?(?:\s+\"[^\"]*\")?\s*\)")
URL_SCHEME_PATTERN: Pattern[str] = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")

SKILL_NAME_PATTERN: Pattern[str] = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")
SKILL_NAME_MAX_LENGTH: int = 64
SKILL_DESCRIPTION_MAX_LENGTH: int = 1024
