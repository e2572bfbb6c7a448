"""
Markup Repair CLI Commands

Commands for repairing, checking and stripping slide markdown.
"""

import logging
import sys
from typing import Optional

import click

from ..services.document_store import DocumentStore
from ..services.markup_repair import sanitize, strip_all, validate


logger = logging.getLogger(__name__)


def _emit(store: DocumentStore, path: str, text: str, output: Optional[str], in_place: bool):
    if in_place and output:
        raise click.UsageError("Use either --output or --in-place, not both")

    target = path if in_place else output
    if target:
        store.write(target, text)
        click.echo(f"✅ Wrote {target}", err=True)
    else:
        click.echo(text, nl=False)


@click.command(name="sanitize")
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Write the repaired deck here')
@click.option('--in-place', is_flag=True, help='Overwrite PATH with the repaired deck')
def sanitize_command(path: str, output: Optional[str], in_place: bool):
    """
    Repair embedded HTML so the template compiler accepts the deck.

    Examples:
        slidemend sanitize slides.md --in-place
        slidemend sanitize slides.md -o slides.fixed.md
    """
    store = DocumentStore()
    _emit(store, path, sanitize(store.read(path)), output, in_place)


@click.command(name="validate")
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
def validate_command(path: str):
    """
    Check a deck for markup the compiler is likely to reject.

    Exits with status 1 when issues are found.
    """
    report = validate(DocumentStore().read(path))

    if report.valid:
        click.echo(f"✅ {path}: no structural issues found")
        return

    click.echo(f"⚠️  {path}: {len(report.errors)} issue(s) found")
    for error in report.errors:
        click.echo(f"  - {error}")
    sys.exit(1)


@click.command(name="strip")
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Write the stripped deck here')
@click.option('--in-place', is_flag=True, help='Overwrite PATH with the stripped deck')
def strip_command(path: str, output: Optional[str], in_place: bool):
    """
    Remove all HTML outside the frontmatter (lossy fallback).

    Examples:
        slidemend strip slides.md --in-place
    """
    store = DocumentStore()
    _emit(store, path, strip_all(store.read(path)), output, in_place)
