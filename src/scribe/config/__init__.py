"""Configuration loading and validation for Scribe workspaces."""

from __future__ import annotations

from scribe.config.loader import load_config, resolve_config_path
from scribe.config.model import ScribeConfig
from scribe.config.validator import validate_config_file

__all__ = [
    "ScribeConfig",
    "load_config",
    "resolve_config_path",
    "validate_config_file",
]
