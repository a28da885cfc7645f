"""
TypingDNA CLI - Command Line Interface for the TypingDNA Authentication API.

This module provides the main CLI entry point. Commands are registered from
the ``commands`` package:
- Pattern operations (save, verify, match)
- User operations (check, delete)
- Quotes
"""

import sys
import logging
from typing import Optional

import click

from . import __version__, __prog_name__
from .config import DEFAULT_SERVER
from .commands import TypingDNAContext
from .commands.patterns import register_pattern_commands
from .commands.users import register_user_commands
from .commands.quotes import register_quote_commands
from .utils import print_error

logger = logging.getLogger(__name__)


# ============================================================================
# Main CLI Group
# ============================================================================

@click.group()
@click.version_option(version=__version__, prog_name=__prog_name__)
@click.option(
    '--api-key',
    envvar='TYPINGDNA_API_KEY',
    help='TypingDNA API key'
)
@click.option(
    '--api-secret',
    envvar='TYPINGDNA_API_SECRET',
    help='TypingDNA API secret'
)
@click.option(
    '--server', '-s',
    envvar='TYPINGDNA_SERVER',
    help=f'API server host (default: {DEFAULT_SERVER})'
)
@click.option(
    '--timeout',
    type=float,
    envvar='TYPINGDNA_TIMEOUT',
    help='Request timeout in milliseconds (default: 30000)'
)
@click.pass_context
def cli(
    ctx,
    api_key: Optional[str],
    api_secret: Optional[str],
    server: Optional[str],
    timeout: Optional[float]
):
    """
    TypingDNA CLI - Typing biometrics from the command line.
    
    Save, verify and match typing patterns through the TypingDNA API.
    
    \b
    Quick Start:
      1. Export credentials:  export TYPINGDNA_API_KEY=... TYPINGDNA_API_SECRET=...
      2. Save a pattern:      typingdna save USER_ID PATTERN
      3. Verify a pattern:    typingdna verify USER_ID PATTERN
      4. Count patterns:      typingdna check USER_ID
    
    \b
    Environment Variables:
      TYPINGDNA_API_KEY     - API key
      TYPINGDNA_API_SECRET  - API secret
      TYPINGDNA_SERVER      - API server host (default: api.typingdna.com)
      TYPINGDNA_TIMEOUT     - Request timeout in milliseconds
    """
    obj = ctx.ensure_object(TypingDNAContext)
    obj.api_key = api_key
    obj.api_secret = api_secret
    obj.server = server
    obj.timeout = timeout


register_pattern_commands(cli)
register_user_commands(cli)
register_quote_commands(cli)


# ============================================================================
# Entry Point
# ============================================================================

def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nAborted.")
        sys.exit(130)
    except Exception as e:
        logger.exception("Unexpected error")
        print_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
