"""Output formatting."""

from htmlchunker.output.formatter import OutputFormatter, get_formatter

__all__ = ["OutputFormatter", "get_formatter"]
