"""Skill validation codes."""

from __future__ import annotations

SKL000: str = "SKL000"  # SKILL.md could not be parsed
SKL001: str = "SKL001"  # missing frontmatter
SKL002: str = "SKL002"  # missing name
SKL003: str = "SKL003"  # invalid name
SKL004: str = "SKL004"  # missing description
SKL005: str = "SKL005"  # description too long
SKL006: str = "SKL006"  # name differs from directory
SKL007: str = "SKL007"  # broken relative link
SKL008: str = "SKL008"  # unreferenced reference file
SKL009: str = "SKL009"  # empty body
SKL010: str = "SKL010"  # duplicate skill name

SKILL_SUGGESTION_LIMIT: int = 3
SKILL_SUGGESTION_CUTOFF: float = 0.6
