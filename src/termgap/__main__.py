"""Main entry point for the termgap command-line tool.

Commands:
- search: Find term A followed closely by term B in a text file
- decode-wire: Decode results stored in the legacy flat-integer format
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from termgap.cli import OutputFormat, decode_wire_command, execute_search_command
from termgap.text import ContextSize
from termgap.types import GapMetric

# TERMGAP_* settings may come from a .env file in the working directory
load_dotenv()

app = typer.Typer(name="termgap", no_args_is_help=True)

_LOG_LEVEL_HELP = "Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"


@app.command()
def search(  # noqa: PLR0913 - CLI entry point with many options
    source: Annotated[
        Path,
        typer.Argument(help='Text file to search, or "-" to read stdin'),
    ],
    term_a: Annotated[str, typer.Argument(help="Leading term")],
    term_b: Annotated[str, typer.Argument(help="Trailing term")],
    gap: Annotated[
        int,
        typer.Option("--gap", "-g", help="Largest gap between the terms", min=0),
    ] = 0,
    metric: Annotated[
        GapMetric,
        typer.Option(
            "--metric",
            "-m",
            help="Measure the gap in characters or in words",
            case_sensitive=False,
        ),
    ] = GapMetric.CHARACTERS,
    ignore_case: Annotated[
        bool,
        typer.Option("--ignore-case", "-i", help="Match terms case-insensitively"),
    ] = False,
    max_matches: Annotated[
        int | None,
        typer.Option(
            "--max-matches",
            help="Stop after this many matches (default: TERMGAP_MAX_MATCHES or 10000)",
            rich_help_panel="Limits",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            help="Threads used to link matches (default: TERMGAP_WORKERS or 1)",
            rich_help_panel="Limits",
        ),
    ] = None,
    normalise: Annotated[
        bool,
        typer.Option(
            "--normalise",
            help="Collapse whitespace and drop zero-width characters before searching",
        ),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output as a table, JSON, or legacy wire integers",
            case_sensitive=False,
            rich_help_panel="Output",
        ),
    ] = OutputFormat.TABLE,
    context: Annotated[
        ContextSize,
        typer.Option(
            "--context",
            help="Context shown around each match in table output",
            case_sensitive=False,
            rich_help_panel="Output",
        ),
    ] = ContextSize.MEDIUM,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every pipeline event (sets log level to DEBUG)",
        ),
    ] = False,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help=_LOG_LEVEL_HELP, case_sensitive=False),
    ] = "WARNING",
) -> None:
    """Find each TERM_A followed by TERM_B within the given gap.

    Example:
        termgap search article.txt quick fox --gap 1 --metric words
        cat notes.txt | termgap search - error timeout -g 40 -i --format json

    """
    execute_search_command(
        source,
        term_a,
        term_b,
        gap,
        metric=metric,
        ignore_case=ignore_case,
        max_matches=max_matches,
        workers=workers,
        normalise=normalise,
        output_format=output_format,
        context_size=context,
        verbose=verbose,
        log_level=log_level,
    )


@app.command(name="decode-wire")
def decode_wire(
    source: Annotated[
        Path,
        typer.Argument(
            help='File of whitespace-separated integers ending in -1, or "-" for stdin'
        ),
    ],
    log_level: Annotated[
        str,
        typer.Option("--log-level", help=_LOG_LEVEL_HELP, case_sensitive=False),
    ] = "WARNING",
) -> None:
    """Decode matches stored in the legacy flat-integer format."""
    decode_wire_command(source, log_level)


if __name__ == "__main__":
    app()
