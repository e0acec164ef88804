"""Docker version command."""

import sys

import click

from ..helpers import get_control_plane, print_table
from ...services.exceptions import DockerServiceError


@click.command()
def version():
    """Show Docker version information"""
    plane = get_control_plane()
    try:
        info = plane.get_version()
    except DockerServiceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    finally:
        plane.close()

    rows = [
        ["Version", info.version],
        ["API version", info.api_version],
        ["Go version", info.go_version],
        ["Git commit", info.git_commit],
        ["OS/Arch", f"{info.os}/{info.arch}"],
    ]
    if info.kernel_version:
        rows.append(["Kernel", info.kernel_version])
    if info.build_time:
        rows.append(["Built", info.build_time])
    print_table(["", "Docker Engine"], rows, tablefmt="plain")
