"""htmlchunker: split single-page HTML documentation into chunked pages.

The depth specifier decides how deep each chapter is split:

    >>> from htmlchunker import resolve
    >>>
    >>> table = resolve("3,1:2,8:5")
    >>> table.effective_level(1), table.effective_level(2), table.effective_level(8)
    (2, 3, 5)
"""

__version__ = "0.9.0"

from htmlchunker.config import ChunkerConfig, Settings, get_settings, make_config
from htmlchunker.depth import DepthTable, DepthTerm, expand_range, parse_term, resolve
from htmlchunker.exceptions import (
    ConfigError,
    DepthSpecifierError,
    HtmlChunkerError,
    InputFileError,
    InvalidDepthSpecifierError,
    InvalidRangeError,
)

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "HtmlChunkerError",
    "InputFileError",
    "DepthSpecifierError",
    "InvalidDepthSpecifierError",
    "InvalidRangeError",
    "ConfigError",
    # Depth specifier
    "DepthTable",
    "DepthTerm",
    "expand_range",
    "parse_term",
    "resolve",
    # Configuration
    "ChunkerConfig",
    "Settings",
    "get_settings",
    "make_config",
]
