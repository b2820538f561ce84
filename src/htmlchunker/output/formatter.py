"""Output formatter with JSON/pretty modes and TTY detection."""

import io
import json
import sys
from dataclasses import dataclass, field
from typing import Any

from rich.console import Console
from rich.table import Table

LEVEL_NAMES = {
    1: "chapter",
    2: "section",
    3: "subsection",
    4: "subsubsection",
    5: "paragraph",
    6: "subparagraph",
}


@dataclass
class OutputFormatter:
    """Handles output formatting with JSON/pretty modes.

    Auto-detects TTY for default mode:
    - TTY (terminal): Pretty formatted output with colors
    - Non-TTY (pipe/redirect): JSON output for machine consumption

    Supports quiet mode to suppress all output.
    """

    force_json: bool = False
    force_pretty: bool = False
    quiet: bool = False
    _console: Console | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self._console is None:
            if self.quiet:
                # Null console - discards output
                self._console = Console(file=io.StringIO())
            else:
                self._console = Console()

    @property
    def console(self) -> Console:
        """Get the console instance (guaranteed non-None after init)."""
        assert self._console is not None
        return self._console

    @property
    def use_json(self) -> bool:
        """Determine if JSON output should be used."""
        if self.force_json:
            return True
        if self.force_pretty:
            return False
        # Auto-detect: JSON if stdout is not a TTY
        return not sys.stdout.isatty()

    def output(self, data: dict[str, Any]) -> None:
        """Output data in appropriate format.

        Args:
            data: Dictionary to output.
        """
        if self.quiet:
            return

        if self.use_json:
            self._output_json(data)
        else:
            self._output_pretty_default(data)

    def _output_json(self, data: dict[str, Any]) -> None:
        """Output as JSON."""
        print(json.dumps(data, indent=2))

    def _output_pretty_default(self, data: dict[str, Any]) -> None:
        """Default pretty output using Rich."""
        if "outdir" in data:
            self._output_config(data)
        elif "depth" in data:
            self._output_depth(data["depth"], data.get("chapters"))
        else:
            # Fallback to JSON for unknown structures
            self._output_json(data)

    def _output_config(self, data: dict[str, Any]) -> None:
        """Output a prepared chunker configuration."""
        self.console.print(f"\n[bold]{data.get('input', 'Document')}[/bold]")
        self.console.print(f"[dim]Output directory:[/dim] {data['outdir']}")
        if data.get("stale", True):
            self.console.print("[green]Ready to split[/green]")
        else:
            self.console.print("[yellow]Up to date[/yellow] [dim](use --force to split anyway)[/dim]")
        self._output_depth(data.get("depth", {}), data.get("chapters"))

    def _output_depth(self, depth: dict[str, Any], chapters: list[dict[str, Any]] | None) -> None:
        """Output a depth table."""
        default = depth.get("default", 1)
        self.console.print(
            f"\n[bold]Default level:[/bold] {default} ({LEVEL_NAMES.get(default, 'deeper')})"
        )

        overrides = depth.get("overrides", {})
        if overrides:
            self.console.print(f"\n[bold]Chapter overrides ({len(overrides)}):[/bold]")
            table = Table(show_header=True, header_style="bold")
            table.add_column("Chapter", style="cyan", justify="right", width=8)
            table.add_column("Level", justify="right", width=6)
            table.add_column("Extracts")
            for chapter, level in overrides.items():
                table.add_row(str(chapter), str(level), LEVEL_NAMES.get(level, "deeper"))
            self.console.print(table)

        if chapters:
            self.console.print(f"\n[bold]Effective levels ({len(chapters)} chapters):[/bold]")
            table = Table(show_header=True, header_style="bold")
            table.add_column("Chapter", style="cyan", justify="right", width=8)
            table.add_column("Level", justify="right", width=6)
            for ch in chapters:
                table.add_row(str(ch["chapter"]), str(ch["level"]))
            self.console.print(table)


def get_formatter(
    json_flag: bool = False,
    pretty_flag: bool = False,
    quiet: bool = False,
) -> OutputFormatter:
    """Get an output formatter with the specified flags.

    Args:
        json_flag: Force JSON output.
        pretty_flag: Force pretty output.
        quiet: Suppress all output.

    Returns:
        Configured OutputFormatter instance.
    """
    return OutputFormatter(
        force_json=json_flag,
        force_pretty=pretty_flag,
        quiet=quiet,
    )
