"""Depth command for inspecting a depth specifier."""

import typer

from htmlchunker.cli.utils import is_quiet
from htmlchunker.config import get_settings
from htmlchunker.depth import resolve
from htmlchunker.output import get_formatter


def depth(
    specifier: str = typer.Argument(..., help="Depth specifier, e.g. 3,1:2,8:5"),
    chapters: int | None = typer.Option(
        None,
        "--chapters",
        "-c",
        min=1,
        help="Also list the effective level of chapters 1..N",
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
    """Show how a depth specifier resolves.

    A bare number sets the default level (1 chapters, 2 sections, 3
    subsections, and so on). CHAPTER:LEVEL overrides one chapter and
    FROM-TO:LEVEL a range of chapters. Later terms win.

    Examples:

        htmlchunker depth 2

        htmlchunker depth 3,1:2,8:5

        htmlchunker depth 1,3-8:2 --chapters 10
    """
    settings = get_settings()
    table = resolve(specifier, max_chapters=settings.depth.max_chapters)

    result = {"success": True, "specifier": specifier, "depth": table.to_dict()}
    if chapters:
        result["chapters"] = [
            {"chapter": i, "level": level} for i, level in enumerate(table.levels(chapters), start=1)
        ]

    formatter = get_formatter(json_flag=use_json, pretty_flag=pretty, quiet=is_quiet())
    formatter.output(result)
