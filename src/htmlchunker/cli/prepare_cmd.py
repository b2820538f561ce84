"""Prepare command: resolve options and set up the output directory."""

import asyncio
import logging
from pathlib import Path

import typer

from htmlchunker.cli.utils import is_quiet
from htmlchunker.config import ChunkerConfig, make_config
from htmlchunker.exceptions import InputFileError
from htmlchunker.fs import exists, mkdirs, rm, source_is_newer_than
from htmlchunker.output import get_formatter

logger = logging.getLogger(__name__)

# First page written by the chunker; used to decide staleness
INDEX_FILE = "index.html"


async def prepare_outdir(config: ChunkerConfig, clean: bool = False, force: bool = False) -> bool:
    """Get the output directory ready for chunking.

    Args:
        config: Resolved chunker configuration.
        clean: Remove the output directory before anything else.
        force: Treat the output as stale even if it is up to date.

    Returns:
        True if the document should be split, False if the existing
        output is newer than the input.
    """
    if clean and await exists(config.outdir):
        await rm(config.outdir)
        logger.info(f"Removed previous output: {config.outdir}")

    stale = force or await source_is_newer_than(config.single_html, config.outdir / INDEX_FILE)
    if stale:
        await mkdirs(config.outdir)
    else:
        logger.info(f"{config.outdir / INDEX_FILE} is newer than {config.single_html}")
    return stale


def prepare(
    single_html: Path = typer.Argument(..., help="Single HTML file generated by Asciidoctor"),
    outdir: Path | None = typer.Option(
        None,
        "--outdir",
        "-o",
        help="Directory the chunked HTML is written to [default: html_chunks]",
    ),
    depth: str | None = typer.Option(
        None,
        "--depth",
        "-d",
        help="Depth specifier, e.g. 3,1:2,8:5 [default: 1]",
    ),
    clean: bool = typer.Option(
        False,
        "--clean",
        help="Remove the output directory first",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Split even if the output is newer than the input",
    ),
    use_json: bool = typer.Option(
        False,
        "--json",
        help="Force JSON output",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Force pretty output",
    ),
):
    """Resolve the chunking options for an HTML document.

    The default splits are made by preamble, parts and chapters. Use
    --depth to extract deeper levels, globally or per chapter.

    Examples:

        htmlchunker prepare book.html

        htmlchunker prepare book.html -o site --depth 3,1:2,8:5

        htmlchunker prepare book.html --depth 1,3-8:2 --clean
    """
    if not single_html.is_file():
        raise InputFileError(f"Input file not found: {single_html}")

    config = make_config(single_html, outdir=outdir, depth=depth)
    stale = asyncio.run(prepare_outdir(config, clean=clean, force=force))

    formatter = get_formatter(json_flag=use_json, pretty_flag=pretty, quiet=is_quiet())
    formatter.output({"success": True, **config.to_dict(), "stale": stale})
