"""Main Typer application for htmlchunker CLI."""

import typer
from rich.console import Console

from htmlchunker import __version__
from htmlchunker.cli.utils import configure_logging, handle_errors, set_context

# Default console for output
console = Console(stderr=True)

app = typer.Typer(
    name="htmlchunker",
    help="""Split an HTML file generated by Asciidoctor into chunked pages.

    [bold]Commands:[/bold]
    prepare     Resolve options and set up the output directory
    depth       Show how a depth specifier resolves
    """,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"htmlchunker version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logs and full tracebacks.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress status output; still shows errors.",
    ),
    silent: bool = typer.Option(
        False,
        "--silent",
        help="Completely silent (exit code only).",
    ),
):
    """htmlchunker: split single-page HTML documentation into chunks."""
    ctx.ensure_object(dict)
    quiet_level = 2 if silent else 1 if quiet else 0
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet_level

    # Also set global context for modules that can't access typer context
    set_context(verbose=verbose, quiet=quiet_level)
    configure_logging(verbose)


def _setup_commands():
    """Register commands with error handling."""
    from htmlchunker.cli import depth_cmd, prepare_cmd

    app.command("prepare")(handle_errors(prepare_cmd.prepare))
    app.command("depth")(handle_errors(depth_cmd.depth))


_setup_commands()


if __name__ == "__main__":
    app()
