"""Logs command."""

import codecs

import click

from ..helpers import get_control_plane, resolve_container
from ...core.log_relay import Sink, SinkClosed

# Seconds between checks for Ctrl-C while waiting on the stream
WAIT_INTERVAL = 0.5


def make_echo_sink() -> Sink:
    """Build a sink that writes log chunks to stdout as they arrive.

    One decoder is kept for the whole stream, so a UTF-8 character split
    across two chunks is still printed whole.
    """
    decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')

    def echo_sink(chunk: bytes) -> None:
        text = decoder.decode(chunk)
        if not text:
            return
        try:
            click.echo(text, nl=False)
        except OSError as e:
            raise SinkClosed(str(e)) from e

    return echo_sink


@click.command()
@click.argument('container')
def logs(container):
    """Follow a container's log output (Ctrl-C to stop)"""
    plane = get_control_plane()
    try:
        record = resolve_container(plane, container)
        subscription = plane.subscribe_logs(record.id, make_echo_sink())
        try:
            while not subscription.wait(timeout=WAIT_INTERVAL):
                pass
        except KeyboardInterrupt:
            subscription.cancel()
            click.echo("\nStopped following logs.")
    finally:
        plane.close()
