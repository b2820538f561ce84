"""CLI module for htmlchunker."""

from htmlchunker.cli.app import app

__all__ = ["app"]
