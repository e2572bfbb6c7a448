"""
Main CLI entry point for slidemend
"""

import logging

import click

from .. import __version__
from ..core.observability import setup_logfire
from .build import build_deck
from .repair import sanitize_command, strip_command, validate_command


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Log each repair and build step')
def cli(verbose: bool):
    """
    slidemend - Markup repair for generated slide decks

    Repair, check and strip the HTML embedded in slide markdown, and build
    decks with automatic fallbacks when the compiler rejects them.
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="[%(asctime)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    setup_logfire()


# Register commands
cli.add_command(sanitize_command)
cli.add_command(validate_command)
cli.add_command(strip_command)
cli.add_command(build_deck)


if __name__ == '__main__':
    cli()
