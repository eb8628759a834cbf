"""Command-line interface for the GraphQL signature extractor.

Commands:
- extract: Print the argument signature of a GraphQL document
- ls-types: List the GraphQL scalar names and the types they map to
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Literal

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from typing_extensions import override

from waivern_graphql_signature.config import SignatureExtractorConfig
from waivern_graphql_signature.extractor import SignatureExtractor
from waivern_graphql_signature.logging import setup_logging
from waivern_graphql_signature.models import Signature
from waivern_graphql_signature.types import parse_graphql_type

logger = logging.getLogger(__name__)
console = Console()
err_console = Console(stderr=True)

app = typer.Typer(name="wgs", help="Extract typed signatures from GraphQL documents.")

_STDIN_SOURCE = "-"
_KNOWN_SCALARS = ("String", "ID", "Int", "Float", "Boolean")


class CLIError(Exception):
    """Exception for CLI-related errors with enhanced context."""

    def __init__(
        self,
        message: str,
        command: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialise CLI error with context.

        Args:
            message: Human-readable error message describing what went wrong
            command: Name of the CLI command that failed (e.g., "extract")
            original_error: The underlying exception that caused this CLI error

        """
        super().__init__(message)
        self.command = command
        self.original_error = original_error

    @override
    def __str__(self) -> str:
        """Return formatted error message with CLI context."""
        base_message = super().__str__()
        if self.command:
            return f"CLI command '{self.command}' failed: {base_message}"
        return base_message


@contextmanager
def cli_error_handler(command: str, title: str) -> Generator[None]:
    """Display any failure as a Rich error panel and exit with code 1.

    Args:
        command: CLI command name for error context.
        title: Panel title for the error display.

    """
    try:
        yield
    except CLIError as e:
        logger.error("%s: %s", title, e)
        _print_error_panel(title, e)
        raise typer.Exit(1) from e
    except Exception as e:
        cli_error = CLIError(str(e), command=command, original_error=e)
        logger.error("%s: %s", title, cli_error)
        _print_error_panel(title, cli_error)
        raise typer.Exit(1) from cli_error


def _print_error_panel(title: str, error: Exception) -> None:
    err_console.print(
        Panel(
            f"[red]{escape(str(error))}[/red]",
            title=f"❌ {title}",
            border_style="red",
        )
    )


def read_source(source: str) -> str:
    """Read document text from a file path, or stdin for ``-``.

    Raises:
        CLIError: If the file cannot be read

    """
    if source == _STDIN_SOURCE:
        return sys.stdin.read()

    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise CLIError(
            f"Cannot read GraphQL document {path}: {e}",
            command="extract",
            original_error=e,
        ) from e


def render_signature_table(signature: Signature) -> Table:
    """Build a Rich table describing each argument of a signature."""
    table = Table(title="GraphQL Signature")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Declared As")
    table.add_column("Default")

    for arg in signature.args:
        default = escape(repr(arg.default)) if arg.has_default else "[dim]-[/dim]"
        table.add_row(
            escape(arg.name),
            escape(str(arg.type)),
            escape(arg.original_type_text or ""),
            default,
        )

    return table


def extract_signature_command(
    source: str,
    output_format: Literal["table", "json"] = "table",
    scope: str = "document",
    skip_malformed: bool = False,
    log_level: str = "INFO",
) -> None:
    """Extract and print the signature of a GraphQL document.

    Raises:
        typer.Exit: If reading, configuration or extraction fails

    """
    setup_logging(level=log_level)

    with cli_error_handler("extract", "Extraction failed"):
        config = SignatureExtractorConfig.from_properties(
            {"scope": scope, "on_malformed": "skip" if skip_malformed else "raise"}
        )
        text = read_source(source)
        signature = SignatureExtractor(config).extract(text)
        logger.info("Found %d argument(s) in %s", len(signature.args), source)

        if output_format == "json":
            typer.echo(signature.to_json())
        else:
            console.print(render_signature_table(signature))


@app.command(name="extract")
def extract(
    source: Annotated[
        str,
        typer.Argument(help="Path to the GraphQL document, or '-' for stdin"),
    ],
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format (table, json)",
            case_sensitive=False,
        ),
    ] = "table",
    scope: Annotated[
        str,
        typer.Option(
            "--scope",
            help="Scan the whole document or only the variable header (document, header)",
        ),
    ] = "document",
    skip_malformed: Annotated[
        bool,
        typer.Option(
            "--skip-malformed",
            help="Skip declarations without a variable name instead of failing",
        ),
    ] = False,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Set logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
            case_sensitive=False,
        ),
    ] = "WARNING",
) -> None:
    """Print the argument signature of a GraphQL document.

    Example:
        wgs extract query.graphql --format json

    """
    output_format = output_format.lower()
    if output_format not in ("table", "json"):
        raise typer.BadParameter(
            f"Unknown format '{output_format}'", param_hint="--format"
        )
    extract_signature_command(
        source,
        "json" if output_format == "json" else "table",
        scope,
        skip_malformed,
        log_level,
    )


@app.command(name="ls-types")
def list_types() -> None:
    """List the GraphQL scalar names and the types they map to."""
    table = Table(title="Scalar Types")
    table.add_column("GraphQL", style="cyan")
    table.add_column("Type", style="green")

    for scalar in _KNOWN_SCALARS:
        table.add_row(scalar, escape(str(parse_graphql_type(scalar))))
    table.add_row("[dim]any other name[/dim]", str(parse_graphql_type("")))

    console.print(table)
