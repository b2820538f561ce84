"""Shared utilities for CLI commands."""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import typer
from rich.console import Console

from htmlchunker.exceptions import HtmlChunkerError

# Type variable for decorators
F = TypeVar("F", bound=Callable[..., Any])

# Context storage for flags
_context: dict[str, Any] = {"verbose": False, "quiet": 0}


def set_context(verbose: bool = False, quiet: int = 0) -> None:
    """Set global context values."""
    _context["verbose"] = verbose
    _context["quiet"] = quiet


def get_context_value(key: str, default: Any = None) -> Any:
    """Get a value from the context."""
    return _context.get(key, default)


def configure_logging(verbose: bool = False) -> None:
    """Send htmlchunker debug logs to stderr in verbose mode."""
    if verbose:
        logging.basicConfig(
            level=logging.WARNING,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        logging.getLogger("htmlchunker").setLevel(logging.DEBUG)


def is_quiet() -> bool:
    """Check if quiet mode is enabled (-q or --silent)."""
    return get_context_value("quiet", 0) >= 1


def is_silent() -> bool:
    """Check if silent mode is enabled (--silent).

    In silent mode, even errors are suppressed (exit code only).
    """
    return get_context_value("quiet", 0) >= 2


def is_verbose() -> bool:
    """Check if verbose mode is enabled (-v)."""
    return bool(get_context_value("verbose", False))


def handle_errors(func: F) -> F:
    """Decorator for consistent CLI error handling.

    Catches common exceptions and displays user-friendly error messages
    instead of raw Python tracebacks. Respects --verbose and --quiet flags.

    Quiet levels:
    - -q: Suppress status messages, show errors with hints
    - --silent: Suppress everything (exit code only)
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        err_console = Console(stderr=True)
        verbose = is_verbose()
        silent = is_silent()

        try:
            return func(*args, **kwargs)
        except HtmlChunkerError as e:
            if not silent:
                if verbose:
                    err_console.print_exception()
                else:
                    err_console.print(f"[red]Error:[/red] {e.message}")
                    if e.details:
                        err_console.print(f"[dim]{e.details}[/dim]")
                    if e.hint:
                        err_console.print(f"[dim]Hint: {e.hint}[/dim]")
            raise typer.Exit(e.exit_code)
        except PermissionError as e:
            if not silent:
                if verbose:
                    err_console.print_exception()
                else:
                    filename = getattr(e, "filename", None) or str(e)
                    err_console.print(f"[red]Permission denied:[/red] {filename}")
            raise typer.Exit(1)
        except KeyboardInterrupt:
            if not silent:
                err_console.print("\n[yellow]Interrupted[/yellow]")
            raise typer.Exit(130)
        except (typer.Exit, typer.BadParameter):
            raise
        except Exception as e:
            if not silent:
                if verbose:
                    err_console.print_exception()
                else:
                    err_console.print(f"[red]Unexpected error:[/red] {type(e).__name__}: {e}")
            raise typer.Exit(1)

    return wrapper  # type: ignore[return-value]
