"""Container operation commands."""

import click

from ..helpers import get_control_plane, report_outcome, resolve_container


def run_operation(container: str, operation: str) -> None:
    """Resolve a container reference and execute an operation on it."""
    plane = get_control_plane()
    try:
        record = resolve_container(plane, container)
        outcome = plane.execute(record.id, operation)
    finally:
        plane.close()
    report_outcome(outcome)


@click.command()
@click.argument('container')
@click.argument('operation')
def op(container, operation):
    """Run OPERATION (start, stop, restart, delete, open-web, open-shell) on a container"""
    run_operation(container, operation)


def _shortcut(name: str, operation: str, help_text: str) -> click.Command:
    @click.command(name=name, help=help_text)
    @click.argument('container')
    def command(container):
        run_operation(container, operation)
    return command


start = _shortcut('start', 'start', 'Start a container')
stop = _shortcut('stop', 'stop', 'Stop a container')
restart = _shortcut('restart', 'restart', 'Restart a container')
rm = _shortcut('rm', 'delete', 'Delete a container')
web = _shortcut('web', 'open-web', "Open a container's first published port in the browser")
shell = _shortcut('shell', 'open-shell', 'Open an interactive shell in a container')
