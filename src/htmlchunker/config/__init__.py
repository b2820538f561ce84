"""Configuration for htmlchunker."""

from htmlchunker.config.options import ChunkerConfig, make_config
from htmlchunker.config.settings import Settings, get_settings, load_settings

__all__ = ["ChunkerConfig", "Settings", "get_settings", "load_settings", "make_config"]
