"""
CLI entry point for the ideabank console.
"""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config.settings import settings
from .models import OperationResult
from .session import Session


def _finish(session: Session, result: OperationResult) -> None:
    """Print the accumulated log, then exit non-zero on failure."""
    output = session.read_log()
    if output:
        click.echo(output, nl=False)
    session.clear_log()
    if not result.ok:
        click.echo(click.style(f"✗ {result.kind.value} error: {result.detail}", fg="red"), err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "-c", "--config",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the database properties or YAML file"
)
@click.option(
    "-q", "--quiet",
    is_flag=True,
    help="Do not print progress messages"
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level for diagnostics on stderr"
)
@click.pass_context
def cli(ctx: click.Context, config: Path, quiet: bool, log_level: str):
    """Ideabank - list employees and save bright ideas."""
    logging.basicConfig(
        level=(log_level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True
    )
    ctx.obj = Session(config_path=config, verbose=False if quiet else None)


@cli.command()
@click.pass_obj
def check(session: Session):
    """Open and close a connection to verify the configuration."""
    result = session.ensure_connected()
    if result.ok:
        session.disconnect()
    _finish(session, result)
    click.echo(click.style("✓ Database is reachable", fg="green"))


@cli.command()
@click.pass_obj
def employees(session: Session):
    """List the employee table."""
    _finish(session, session.list_employees())


@cli.command()
@click.argument("text")
@click.pass_obj
def idea(session: Session, text: str):
    """Save a bright idea."""
    _finish(session, session.save_idea(text))


@cli.command()
@click.pass_obj
def ideas(session: Session):
    """List the saved ideas."""
    _finish(session, session.list_ideas())


if __name__ == "__main__":
    cli()
