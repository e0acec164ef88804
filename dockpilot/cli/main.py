"""Main CLI entry point for dockpilot."""

from pathlib import Path

import click

from .helpers import configure_logging
from .commands.ps import ps
from .commands.show import show, inspect
from .commands.version import version
from .commands.operations import op, start, stop, restart, rm, web, shell
from .commands.logs import logs
from .commands.config import config
from ..core.constants import DATA_DIR_ENV


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option('--config-dir', envvar=DATA_DIR_ENV, type=click.Path(file_okay=False, path_type=Path),
              help='Directory holding dockpilot configuration')
@click.pass_context
def cli(ctx, verbose, config_dir):
    """dockpilot - Manage local Docker containers"""
    configure_logging(verbose)
    ctx.obj = {'config_dir': config_dir}


# Register commands
cli.add_command(ps)
cli.add_command(show)
cli.add_command(inspect)
cli.add_command(version)
cli.add_command(op)
cli.add_command(start)
cli.add_command(stop)
cli.add_command(restart)
cli.add_command(rm)
cli.add_command(web)
cli.add_command(shell)
cli.add_command(logs)
cli.add_command(config)


if __name__ == '__main__':
    cli()
