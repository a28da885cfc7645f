"""
Quote command for the TypingDNA CLI.
"""

import sys

import click

from ..exceptions import TypingDNAError
from ..utils import OutputFormat, print_error, print_json, setup_logging
from . import common_options, pass_context, require_credentials, TypingDNAContext


def register_quote_commands(cli: click.Group) -> None:
    """Register the quote command with the CLI."""
    
    @cli.command('quote')
    @common_options
    @click.option('--min', 'min_length', type=int, default=100, show_default=True,
                  help='Minimum quote length')
    @click.option('--max', 'max_length', type=int, default=200, show_default=True,
                  help='Maximum quote length')
    @pass_context
    @require_credentials
    def quote(
        ctx: TypingDNAContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        min_length: int,
        max_length: int
    ):
        """Get a quote for the user to type."""
        setup_logging(verbose, quiet)
        fmt = OutputFormat(output_format)
        
        try:
            with ctx.get_client() as client:
                result = client.get_quote(min_length, max_length)
            
            if fmt == OutputFormat.JSON:
                print_json(result.to_dict())
            elif result.quote:
                click.echo(f"\n\"{result.quote}\"")
                if result.author:
                    click.echo(f"  - {result.author}")
            else:
                print_error(result.message or "No quote returned")
                sys.exit(1)
        except TypingDNAError as e:
            print_error(str(e), e.details)
            sys.exit(1)
