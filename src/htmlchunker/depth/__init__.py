"""Depth specifier resolution."""

from htmlchunker.depth.ranges import MAX_EXPANDED_CHAPTERS, expand_range
from htmlchunker.depth.resolver import DepthTerm, parse_term, resolve
from htmlchunker.depth.table import DEFAULT_LEVEL, DepthTable

__all__ = [
    "DEFAULT_LEVEL",
    "MAX_EXPANDED_CHAPTERS",
    "DepthTable",
    "DepthTerm",
    "expand_range",
    "parse_term",
    "resolve",
]
