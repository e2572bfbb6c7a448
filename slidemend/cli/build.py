"""
Build CLI Command

Builds a deck with the escalating fallback ladder.
"""

import logging
import shlex
import sys
from typing import Optional

import click

from ..core.config import BuildProfile, load_build_profile
from ..services.build_orchestrator import BuildOrchestrator


logger = logging.getLogger(__name__)


@click.command(name="build")
@click.option('--slides', help='Slides file (default: SLIDEMEND_SLIDES_PATH or slides.md)')
@click.option('--cwd', type=click.Path(file_okay=False), help='Directory to run the build in')
@click.option('--command', 'build_command', help='Build command to run')
@click.option('--sanitize-first', is_flag=True, help='Sanitize the deck before the first build')
@click.option('--profile', type=click.Path(exists=True, dir_okay=False), help='YAML build profile')
def build_deck(
    slides: Optional[str],
    cwd: Optional[str],
    build_command: Optional[str],
    sanitize_first: bool,
    profile: Optional[str],
):
    """
    Build the deck, falling back to stripped HTML and then a minimal deck.

    Examples:
        slidemend build --slides slides.md
        slidemend build --profile slidemend.yml --sanitize-first
    """
    try:
        build_profile = load_build_profile(profile) if profile else BuildProfile()
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='--profile')

    if cwd:
        build_profile.cwd = cwd
    if build_command:
        build_profile.command = shlex.split(build_command)

    click.echo("=" * 60)
    click.echo("🛠️  Slide Build")
    click.echo("=" * 60)

    outcome = BuildOrchestrator(profile=build_profile).run(
        slides_path=slides,
        sanitize_first=sanitize_first or None,
    )

    for attempt in outcome.attempts:
        status = "✅" if attempt.success else "❌"
        click.echo(f"{status} {attempt.strategy} build (exit code: {attempt.returncode})")

    if outcome.error_context:
        click.echo()
        click.echo(f"Error context (line {outcome.error_line}):")
        click.echo(outcome.error_context)

    if outcome.success:
        if outcome.strategy != "normal":
            click.echo(f"⚠️  Built with the {outcome.strategy} fallback; some formatting may be lost")
        return

    click.echo("❌ All build attempts failed!", err=True)
    click.echo(outcome.last_stderr, err=True)
    sys.exit(1)
