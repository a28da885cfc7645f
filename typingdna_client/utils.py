"""
Output and logging helpers for the TypingDNA CLI.
"""

import json
import logging
import sys
from enum import Enum
from typing import Any, List, Optional

import click


class OutputFormat(str, Enum):
    """Output format for command results."""
    TABLE = "table"
    JSON = "json"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for the CLI.
    
    Args:
        verbose: Show debug output, including request lines
        quiet: Only show errors
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("typingdna_client").setLevel(level)
    if not verbose:
        logging.getLogger("urllib3").setLevel(logging.WARNING)


def print_success(message: str) -> None:
    click.secho(f"✓ {message}", fg="green")


def print_error(message: str, details: Optional[str] = None) -> None:
    click.secho(f"✗ {message}", fg="red", err=True)
    if details:
        click.echo(f"  {details}", err=True)


def print_warning(message: str) -> None:
    click.secho(f"! {message}", fg="yellow")


def print_info(message: str) -> None:
    click.echo(message)


def print_json(data: Any) -> None:
    """Print data as indented JSON."""
    click.echo(json.dumps(data, indent=2, default=str))


def print_table(headers: List[str], rows: List[List[Any]]) -> None:
    """Print rows as a plain aligned table."""
    cells = [[str(c) if c is not None else "-" for c in row] for row in rows]
    widths = [len(h) for h in headers]
    for row in cells:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(click.unstyle(cell)))
    
    def line(values: List[str]) -> str:
        return "  ".join(
            v + " " * (widths[i] - len(click.unstyle(v))) for i, v in enumerate(values)
        ).rstrip()
    
    click.echo(line([click.style(h, bold=True) for h in headers]))
    click.echo("  ".join("-" * w for w in widths))
    for row in cells:
        click.echo(line(row))


def print_result(result: Any, fmt: OutputFormat) -> None:
    """Print a result object as JSON or as a two-column table."""
    data = result.to_dict()
    if fmt == OutputFormat.JSON:
        print_json(data)
        return
    print_table(["Field", "Value"], [[key, value] for key, value in data.items()])


def confirm_action(message: str, default: bool = False) -> bool:
    """Ask for confirmation."""
    return click.confirm(message, default=default)
