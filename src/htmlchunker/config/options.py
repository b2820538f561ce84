"""Chunker configuration built from command-line values."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from htmlchunker.config.settings import Settings, get_settings
from htmlchunker.depth import DepthTable, resolve


@dataclass(frozen=True)
class ChunkerConfig:
    """Everything the chunking engine needs for one run."""

    single_html: Path
    outdir: Path
    depth: DepthTable

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "input": str(self.single_html),
            "outdir": str(self.outdir),
            "depth": self.depth.to_dict(),
        }


def make_config(
    single_html: Path,
    outdir: Path | None = None,
    depth: str | None = None,
    settings: Settings | None = None,
) -> ChunkerConfig:
    """Build the chunker configuration.

    Missing values fall back to the configured defaults (``html_chunks``
    and ``"1"`` unless overridden).

    Args:
        single_html: The HTML document to split.
        outdir: Output directory for the chunked pages.
        depth: Raw depth specifier, e.g. ``"3,1:2,8:5"``.
        settings: Settings to take defaults from.

    Returns:
        The resolved ChunkerConfig.

    Raises:
        DepthSpecifierError: If the depth specifier is malformed.
    """
    settings = settings or get_settings()
    table = resolve(
        depth if depth is not None else settings.depth.default,
        max_chapters=settings.depth.max_chapters,
    )
    return ChunkerConfig(
        single_html=Path(single_html),
        outdir=Path(outdir) if outdir is not None else settings.output.directory,
        depth=table,
    )
