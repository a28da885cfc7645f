"""
Typing pattern commands for the TypingDNA CLI.

Commands:
- save: Save a pattern for a user
- verify: Verify a pattern against a user's stored patterns
- match: Compare two patterns
"""

import sys

import click

from ..exceptions import TypingDNAError
from ..utils import (
    OutputFormat,
    print_error,
    print_result,
    print_success,
    print_warning,
    setup_logging,
)
from . import common_options, pass_context, require_credentials, TypingDNAContext


def _report(result, fmt: OutputFormat, quiet: bool, success_message: str) -> None:
    print_result(result, fmt)
    if quiet or fmt == OutputFormat.JSON:
        return
    if result.success:
        print_success(success_message)
    else:
        print_warning(result.message or "Request was not successful")


def register_pattern_commands(cli: click.Group) -> None:
    """Register pattern commands with the CLI."""
    
    @cli.command('save')
    @common_options
    @click.argument('user_id')
    @click.argument('typing_pattern')
    @pass_context
    @require_credentials
    def save(
        ctx: TypingDNAContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        user_id: str,
        typing_pattern: str
    ):
        """
        Save a typing pattern for a user.
        
        \b
        Examples:
          typingdna save user-123456 "0,2.56,0,0,5,1748..."
        """
        setup_logging(verbose, quiet)
        fmt = OutputFormat(output_format)
        
        try:
            with ctx.get_client() as client:
                result = client.save(user_id, typing_pattern)
            _report(result, fmt, quiet, f"Pattern saved for {user_id}")
        except TypingDNAError as e:
            print_error(str(e), e.details)
            sys.exit(1)
    
    @cli.command('verify')
    @common_options
    @click.argument('user_id')
    @click.argument('typing_pattern')
    @click.option('--quality', type=int, default=2, show_default=True, help='Quality, 1 to 3')
    @click.option(
        '--device-similarity-only',
        is_flag=True,
        help='Only check device similarity'
    )
    @pass_context
    @require_credentials
    def verify(
        ctx: TypingDNAContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        user_id: str,
        typing_pattern: str,
        quality: int,
        device_similarity_only: bool
    ):
        """
        Verify a typing pattern against the stored patterns of a user.
        
        \b
        Examples:
          typingdna verify user-123456 "0,2.56,0,0,5,1748..." --quality 3
        """
        setup_logging(verbose, quiet)
        fmt = OutputFormat(output_format)
        
        try:
            with ctx.get_client() as client:
                result = client.verify(
                    user_id, typing_pattern, quality,
                    {"deviceSimilarityOnly": device_similarity_only}
                )
            _report(result, fmt, quiet, f"Verification completed for {user_id}")
        except TypingDNAError as e:
            print_error(str(e), e.details)
            sys.exit(1)
    
    @cli.command('match')
    @common_options
    @click.argument('typing_pattern1')
    @click.argument('typing_pattern2')
    @click.option('--quality', type=int, default=2, show_default=True, help='Quality, 1 to 3')
    @click.option(
        '--device-similarity-only',
        is_flag=True,
        help='Only check device similarity'
    )
    @pass_context
    @require_credentials
    def match(
        ctx: TypingDNAContext,
        verbose: bool,
        quiet: bool,
        output_format: str,
        typing_pattern1: str,
        typing_pattern2: str,
        quality: int,
        device_similarity_only: bool
    ):
        """
        Compare two typing patterns.
        
        Either argument may hold several patterns separated by ';'.
        """
        setup_logging(verbose, quiet)
        fmt = OutputFormat(output_format)
        
        try:
            with ctx.get_client() as client:
                result = client.match(
                    typing_pattern1, typing_pattern2, quality,
                    {"deviceSimilarityOnly": device_similarity_only}
                )
            _report(result, fmt, quiet, "Match completed")
        except TypingDNAError as e:
            print_error(str(e), e.details)
            sys.exit(1)
