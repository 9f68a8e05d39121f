"""JSDoc extraction and coverage checks."""

from .checker import check_source, check_tree, discover_sources
from .extractor import extract_functions, parse_jsdoc, split_params

__all__ = ["check_source", "check_tree", "discover_sources", "extract_functions", "parse_jsdoc", "split_params"]
