"""Show and inspect container commands."""

import json
import sys

import click

from ..helpers import get_control_plane, resolve_container
from ...services.exceptions import DockerServiceError


@click.command()
@click.argument('container')
def show(container):
    """Show a container's details"""
    plane = get_control_plane()
    try:
        record = resolve_container(plane, container)
    finally:
        plane.close()

    click.echo(f"ID:      {record.id}")
    click.echo(f"Names:   {', '.join(n.lstrip('/') for n in record.names)}")
    click.echo(f"Image:   {record.image}")
    click.echo(f"State:   {record.state}")
    click.echo(f"Status:  {record.status}")
    if record.ports:
        click.echo("Ports:")
        for port in record.ports:
            click.echo(f"  - {port}")
    else:
        click.echo("Ports:   none")


@click.command()
@click.argument('container')
def inspect(container):
    """Show the runtime's full information about a container"""
    plane = get_control_plane()
    try:
        record = resolve_container(plane, container)
        info = plane.inspect_container(record.id)
    except DockerServiceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    finally:
        plane.close()

    click.echo(json.dumps(info, indent=2, default=str))
