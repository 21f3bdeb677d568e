"""Output formatting for termgap CLI commands."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from enum import Enum

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from termgap.text import ContextSize, extract_snippet
from termgap.types import Match, MatchSequence, SearchStatus
from termgap.wire import encode_matches

logger = logging.getLogger(__name__)
console = Console()


class OutputFormat(str, Enum):
    """How search results are printed."""

    TABLE = "table"
    JSON = "json"
    WIRE = "wire"


class OutputFormatter:
    """Prints search results in the chosen format."""

    STATUS_TEXT = {
        SearchStatus.COMPLETE: "[green]complete[/green]",
        SearchStatus.CAPPED: "[yellow]capped at the match limit[/yellow]",
        SearchStatus.RESOURCE_EXHAUSTED: "[red]stopped early: out of memory[/red]",
    }

    def print_result(
        self,
        result: MatchSequence,
        text: str,
        output_format: OutputFormat,
        context_size: ContextSize = ContextSize.MEDIUM,
    ) -> None:
        """Print a search result.

        Args:
            result: Matches returned by the search
            text: The text that was searched, for snippets
            output_format: Table, JSON or legacy wire integers
            context_size: Context shown around each match in table output

        """
        match output_format:
            case OutputFormat.JSON:
                self.print_json(result, text)
            case OutputFormat.WIRE:
                self.print_wire(result)
            case OutputFormat.TABLE:
                self.print_table(result.matches, text, context_size)
                self.print_summary(result)

    def print_table(
        self, matches: Sequence[Match], text: str | None, context_size: ContextSize
    ) -> None:
        """Print a numbered table of matches, with snippets when text is known."""
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Start", style="cyan", justify="right")
        table.add_column("Span", justify="right")
        table.add_column("Gap", style="blue", justify="right")
        if text is not None:
            table.add_column("Context")

        for number, match in enumerate(matches, start=1):
            row = [str(number), str(match.start), str(match.span), str(match.gap_value)]
            if text is not None:
                row.append(escape(extract_snippet(text, match, context_size)))
            table.add_row(*row)

        console.print(table)

    def print_summary(self, result: MatchSequence) -> None:
        """Print the match count and completion status."""
        noun = "match" if len(result) == 1 else "matches"
        console.print(
            f"[bold]{len(result)}[/bold] {noun} - {self.STATUS_TEXT[result.status]}"
        )
        if result.truncated:
            logger.warning("Result truncated: %s", result.status.value)

    def print_json(self, result: MatchSequence, text: str) -> None:
        """Print the result as a JSON document."""
        document = {
            "status": result.status.value,
            "count": len(result),
            "matches": [
                {
                    "start": match.start,
                    "span": match.span,
                    "gap": match.gap_value,
                    "text": text[match.start : match.end],
                }
                for match in result
            ],
        }
        console.print_json(json.dumps(document))

    def print_wire(self, result: MatchSequence) -> None:
        """Print the legacy sentinel-terminated integer run on one line."""
        console.print(
            " ".join(str(value) for value in encode_matches(result)), soft_wrap=True
        )
