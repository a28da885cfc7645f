"""
CLI commands for the TypingDNA client.

Shared context, options and decorators used by the command modules.
"""

import sys
from typing import Optional

import click

from ..api import TypingDNAClient
from ..config import TypingDNAConfig
from ..exceptions import InvalidCredentialsError
from ..utils import print_error


class TypingDNAContext:
    """CLI context object for sharing state between commands."""
    
    def __init__(self):
        self.api_key: Optional[str] = None
        self.api_secret: Optional[str] = None
        self.server: Optional[str] = None
        self.timeout: Optional[float] = None
    
    def get_client(self) -> TypingDNAClient:
        """Create a client from the global options and environment."""
        config = TypingDNAConfig.from_env(self.api_key, self.api_secret)
        client = TypingDNAClient(config=config, server=self.server)
        if self.timeout is not None:
            client.request_timeout(self.timeout)
        return client


pass_context = click.make_pass_decorator(TypingDNAContext, ensure=True)


def common_options(f):
    """Common options for all commands."""
    f = click.option(
        '-v', '--verbose',
        is_flag=True,
        help='Enable verbose output'
    )(f)
    f = click.option(
        '-q', '--quiet',
        is_flag=True,
        help='Suppress non-essential output'
    )(f)
    f = click.option(
        '-f', '--format',
        'output_format',
        type=click.Choice(['table', 'json']),
        default='table',
        help='Output format'
    )(f)
    return f


def require_credentials(f):
    """Decorator to require an API key and secret."""
    @click.pass_context
    def wrapper(click_ctx, *args, **kwargs):
        ctx = click_ctx.ensure_object(TypingDNAContext)
        try:
            TypingDNAConfig.from_env(ctx.api_key, ctx.api_secret)
        except InvalidCredentialsError:
            print_error(
                "TypingDNA API credentials are not configured.",
                "Pass --api-key/--api-secret or set TYPINGDNA_API_KEY and TYPINGDNA_API_SECRET."
            )
            sys.exit(1)
        
        return click_ctx.invoke(f, *args, **kwargs)
    
    return wrapper
