"""CLI command implementations for searching and decoding results."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from termgap.cli.errors import CLIError, cli_error_handler
from termgap.cli.formatting import OutputFormat, OutputFormatter
from termgap.config import SearchConfiguration
from termgap.engine import search
from termgap.logging import setup_logging
from termgap.observers import LoggingObserver
from termgap.text import ContextSize, normalise_text
from termgap.types import GapMetric
from termgap.wire import decode_matches

logger = logging.getLogger(__name__)

STDIN_PATH = Path("-")


def _read_text(path: Path, command: str) -> str:
    """Read UTF-8 text from a file, or from stdin when path is "-"."""
    if path == STDIN_PATH:
        return sys.stdin.read()
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CLIError(
            f"Cannot read {path}: {e}", command=command, original_error=e
        ) from e


def _parse_wire_values(raw: str) -> list[int]:
    try:
        return [int(token) for token in raw.split()]
    except ValueError as e:
        raise CLIError(
            f"Wire data must be whitespace-separated integers: {e}",
            command="decode-wire",
            original_error=e,
        ) from e


def execute_search_command(  # noqa: PLR0913 - Matches CLI entry point signature
    source: Path,
    term_a: str,
    term_b: str,
    gap: int,
    metric: GapMetric = GapMetric.CHARACTERS,
    ignore_case: bool = False,
    max_matches: int | None = None,
    workers: int | None = None,
    normalise: bool = False,
    output_format: OutputFormat = OutputFormat.TABLE,
    context_size: ContextSize = ContextSize.MEDIUM,
    verbose: bool = False,
    log_level: str = "WARNING",
) -> None:
    """CLI command implementation for a proximity search.

    Args:
        source: File to search, or "-" for stdin
        term_a: Leading term
        term_b: Trailing term
        gap: Largest gap that still pairs
        metric: Unit of the gap
        ignore_case: Fold case before comparing
        max_matches: Match cap (overrides TERMGAP_MAX_MATCHES)
        workers: Linking threads (overrides TERMGAP_WORKERS)
        normalise: Collapse whitespace and drop zero-width characters first
        output_format: How to print the result
        context_size: Context shown around matches in table output
        verbose: Log every pipeline event at DEBUG
        log_level: Logging level

    """
    effective_log_level = "DEBUG" if verbose else log_level
    setup_logging(level=effective_log_level)

    with cli_error_handler("search", "Search failed"):
        properties: dict[str, int] = {}
        if max_matches is not None:
            properties["max_matches"] = max_matches
        if workers is not None:
            properties["workers"] = workers
        config = SearchConfiguration.from_properties(properties)

        text = _read_text(source, "search")
        if normalise:
            text = normalise_text(text)
        logger.info("Read %d characters from %s", len(text), source)

        result = search(
            text,
            term_a,
            term_b,
            gap,
            case_insensitive=ignore_case,
            gap_metric=metric,
            config=config,
            observer=LoggingObserver() if verbose else None,
        )

        OutputFormatter().print_result(result, text, output_format, context_size)


def decode_wire_command(source: Path, log_level: str = "WARNING") -> None:
    """CLI command implementation for decoding legacy wire integers.

    Args:
        source: File of whitespace-separated integers, or "-" for stdin
        log_level: Logging level

    """
    setup_logging(level=log_level)

    with cli_error_handler("decode-wire", "Decoding failed"):
        values = _parse_wire_values(_read_text(source, "decode-wire"))
        matches = decode_matches(values)
        logger.info("Decoded %d matches", len(matches))

        formatter = OutputFormatter()
        formatter.print_table(matches, None, ContextSize.MEDIUM)
