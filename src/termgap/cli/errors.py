"""CLI error handling for termgap."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import override

import typer
from rich.console import Console
from rich.panel import Panel

from termgap.errors import (
    ConfigurationError,
    InvalidArgumentError,
    TermGapError,
    WireFormatError,
)

logger = logging.getLogger(__name__)
console = Console(stderr=True)

_ERROR_HINTS: dict[type[TermGapError], str] = {
    InvalidArgumentError: "Check that the text and both terms are non-empty "
    "and the gap is within range.",
    ConfigurationError: "Check the TERMGAP_* environment variables.",
    WireFormatError: "Wire data must be integer triples closed by -1.",
}


class CLIError(Exception):
    """Error raised by a CLI command, carrying the command name and cause."""

    def __init__(
        self,
        message: str,
        command: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialise CLI error with context.

        Args:
            message: Human-readable error message
            command: Name of the CLI command that failed (e.g., "search")
            original_error: The underlying exception

        """
        super().__init__(message)
        self.command = command
        self.original_error = original_error

    @override
    def __str__(self) -> str:
        base_message = super().__str__()
        if self.command:
            return f"termgap {self.command}: {base_message}"
        return base_message

    @property
    def hint(self) -> str | None:
        """Suggestion for the user based on the underlying error type."""
        for error_type, hint in _ERROR_HINTS.items():
            if isinstance(self.original_error, error_type):
                return hint
        return None


def _show(title: str, error: CLIError) -> None:
    body = f"[red]{error}[/red]"
    if error.hint:
        body += f"\n\n[yellow]{error.hint}[/yellow]"
    logger.error("%s: %s", title, error)
    console.print(Panel(body, title=f"❌ {title}", border_style="red"))


@contextmanager
def cli_error_handler(command: str, title: str) -> Generator[None]:
    """Turn exceptions raised by a command into an error panel and exit code 1.

    Args:
        command: CLI command name for error context
        title: Panel title for the error display

    """
    try:
        yield
    except CLIError as e:
        _show(title, e)
        raise typer.Exit(1) from e
    except (TermGapError, OSError, UnicodeDecodeError) as e:
        cli_error = CLIError(str(e), command=command, original_error=e)
        _show(title, cli_error)
        raise typer.Exit(1) from cli_error
