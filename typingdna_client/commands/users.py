"""
User commands for the TypingDNA CLI.

Commands:
- check: Count stored patterns
- delete: Delete stored patterns
"""

import sys
from typing import Optional, Tuple

import click

from ..exceptions import TypingDNAError
from ..models import UserQuery
from ..utils import (
    OutputFormat,
    confirm_action,
    print_error,
    print_info,
    print_result,
    print_success,
    setup_logging,
)
from . import common_options, pass_context, require_credentials, TypingDNAContext


def query_options(f):
    """Filters shared by check and delete."""
    f = click.option(
        '--type', '-t', 'pattern_types',
        multiple=True,
        type=click.Choice(['0', '1', '2']),
        help='Pattern type: 0 anytext, 1 sametext, 2 extended (repeatable)'
    )(f)
    f = click.option('--text-id', help='Text id of the patterns')(f)
    f = click.option(
        '--device',
        type=click.Choice(['desktop', 'mobile']),
        help='Device the patterns were recorded on'
    )(f)
    return f


def register_user_commands(cli: click.Group) -> None:
    """Register user commands with the CLI."""
    
    @cli.command('check')
    @common_options
    @query_options
    @click.argument('user_id')
    @pass_context
    @require_credentials
    def check(
        ctx: TypingDNAContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        pattern_types: Tuple[str, ...],
        text_id: Optional[str],
        device: Optional[str],
        user_id: str
    ):
        """
        Show how many patterns are stored for a user.
        
        \b
        Examples:
          typingdna check user-123456
          typingdna check user-123456 --type 0 --type 2 --device mobile
        """
        setup_logging(verbose, quiet)
        fmt = OutputFormat(output_format)
        query = UserQuery(user_id, list(pattern_types), text_id, device)
        
        try:
            with ctx.get_client() as client:
                result = client.check(query)
            print_result(result, fmt)
        except TypingDNAError as e:
            print_error(str(e), e.details)
            sys.exit(1)
    
    @cli.command('delete')
    @common_options
    @query_options
    @click.argument('user_id')
    @click.option('--yes', '-y', is_flag=True, help='Skip confirmation')
    @pass_context
    @require_credentials
    def delete(
        ctx: TypingDNAContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        pattern_types: Tuple[str, ...],
        text_id: Optional[str],
        device: Optional[str],
        user_id: str,
        yes: bool
    ):
        """
        Delete stored patterns of a user.
        
        Without filters every pattern of the user is deleted.
        """
        setup_logging(verbose, quiet)
        fmt = OutputFormat(output_format)
        
        if not yes:
            if not confirm_action(f"Delete typing patterns of {user_id}?"):
                print_info("Cancelled.")
                return
        
        query = UserQuery(user_id, list(pattern_types), text_id, device)
        
        try:
            with ctx.get_client() as client:
                result = client.delete(query)
            print_result(result, fmt)
            if not quiet and fmt != OutputFormat.JSON and result.success:
                print_success(f"Deleted {result.result} pattern(s) of {user_id}")
        except TypingDNAError as e:
            print_error(str(e), e.details)
            sys.exit(1)
