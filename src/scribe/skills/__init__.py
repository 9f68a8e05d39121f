"""Skill discovery, parsing and validation."""

from __future__ import annotations

from .discovery import derive_skill_name, discover_skill_files, sanitize_skill_name
from .parser import collect_references, parse_skill_file
from .validation import find_skill, load_skills, skill_lookup_name, validate_skill, validate_skills

__all__ = [
    "collect_references",
    "derive_skill_name",
    "discover_skill_files",
    "find_skill",
    "load_skills",
    "parse_skill_file",
    "sanitize_skill_name",
    "skill_lookup_name",
    "validate_skill",
    "validate_skills",
]
