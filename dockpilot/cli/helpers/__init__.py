"""CLI Helper Functions for dockpilot.

This module provides reusable helper functions for CLI commands to reduce
code duplication and standardize behavior across all commands.

The helpers provide:
- Logging setup
- Configuration and control plane construction
- Container reference resolution with short ID and name support
- Consistent table formatting for output
- Reporting of operation outcomes
"""

import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import click
from tabulate import tabulate

from dockpilot.core.control_plane import ControlPlane
from dockpilot.models.container import ContainerRecord
from dockpilot.models.operation import OperationOutcome
from dockpilot.services.exceptions import DockerServiceError
from dockpilot.utils.config_manager import ConfigManager

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def get_config_dir() -> Optional[Path]:
    """Config directory chosen on the command line, if any."""
    ctx = click.get_current_context(silent=True)
    if ctx is None:
        return None
    obj = ctx.find_root().obj or {}
    return obj.get('config_dir')


def get_config_manager() -> ConfigManager:
    """Initialize ConfigManager for the selected config directory."""
    return ConfigManager(get_config_dir())


def get_control_plane() -> ControlPlane:
    """Connect to Docker and build the control plane.

    Note:
        Exits with error message if Docker is not available; nothing can be
        served without it.
    """
    config = get_config_manager().get_config()
    try:
        return ControlPlane(config=config)
    except DockerServiceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def resolve_container(plane: ControlPlane, reference: str) -> ContainerRecord:
    """Resolve a container reference with short ID and name support.

    Note:
        Exits with error message if no single container matches.
    """
    try:
        return plane.resolve(reference)
    except DockerServiceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def style_state(state: str) -> str:
    """Color a container state for terminal output."""
    if state == 'running':
        return click.style(state.upper(), fg='green')
    elif state in ('exited', 'created'):
        return click.style(state.upper(), fg='yellow')
    return click.style((state or 'unknown').upper(), fg='red')


def format_container_table(records: List[ContainerRecord],
                           headers: Optional[List[str]] = None) -> str:
    """Format containers as a table.

    Args:
        records: Containers to show
        headers: Custom headers (optional)

    Returns:
        Formatted table string
    """
    if headers is None:
        headers = ["CONTAINER ID", "NAMES", "IMAGE", "STATE", "STATUS", "PORTS"]

    table_data = []
    for record in records:
        table_data.append([
            record.short_id,
            ", ".join(n.lstrip("/") for n in record.names),
            record.image,
            style_state(record.state),
            record.status,
            ", ".join(str(p) for p in record.ports),
        ])

    return tabulate(table_data, headers=headers, tablefmt="simple")


def print_table(headers: list[str], rows: list[list[Any]],
                tablefmt: str = "simple") -> None:
    """Print a table with project-wide defaults.

    Args:
        headers: Table headers
        rows: Table rows
        tablefmt: Table format (default: "simple")
    """
    table_str = tabulate(rows, headers=headers, tablefmt=tablefmt)
    click.echo(table_str)


def report_outcome(outcome: OperationOutcome) -> None:
    """Print an operation outcome; exit with status 1 if it failed."""
    if outcome.success:
        click.echo(outcome.message)
    else:
        click.echo(f"Error: {outcome.message}", err=True)
        sys.exit(1)
