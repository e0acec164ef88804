"""List containers command."""

import sys

import click

from ..helpers import format_container_table, get_control_plane
from ...services.exceptions import DockerServiceError


@click.command()
@click.option('--running', is_flag=True, help='Only show running containers')
@click.option('--quiet', '-q', is_flag=True, help='Only display container IDs')
def ps(running, quiet):
    """List containers"""
    plane = get_control_plane()
    try:
        containers = plane.list_containers()
    except DockerServiceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    finally:
        plane.close()

    if running:
        containers = [c for c in containers if c.state == 'running']

    if quiet:
        for container in containers:
            click.echo(container.short_id)
        return

    if not containers:
        click.echo("No containers found")
        return

    click.echo(format_container_table(containers))
