"""CLI command implementations for termgap."""

from termgap.cli.errors import CLIError, cli_error_handler
from termgap.cli.formatting import OutputFormat, OutputFormatter
from termgap.cli.search import decode_wire_command, execute_search_command

__all__ = [
    "CLIError",
    "OutputFormat",
    "OutputFormatter",
    "cli_error_handler",
    "decode_wire_command",
    "execute_search_command",
]
