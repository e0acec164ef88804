"""Configuration management commands for dockpilot."""

import json
import sys

import click
from pydantic import ValidationError

from ..helpers import get_config_manager


def _parse_value(value: str):
    """Interpret a command-line value as JSON, falling back to the raw string."""
    try:
        return json.loads(value)
    except ValueError:
        return value


@click.group()
def config():
    """Manage dockpilot configuration"""
    pass


@config.command()
def show():
    """Display current configuration"""
    config_manager = get_config_manager()
    settings = config_manager.get_config()

    click.echo(f"Configuration ({config_manager.config_file}):")
    click.echo(json.dumps(settings.model_dump(), indent=2))


@config.command('set')
@click.argument('key')
@click.argument('value')
def set_value(key, value):
    """Set a configuration value (VALUE is parsed as JSON when possible)"""
    config_manager = get_config_manager()
    try:
        config_manager.set_value(key, _parse_value(value))
    except KeyError:
        click.echo(f"Error: Unknown setting '{key}'", err=True)
        sys.exit(1)
    except ValidationError as e:
        click.echo(f"Error: Invalid value for '{key}': {e.errors()[0]['msg']}", err=True)
        sys.exit(1)
    click.echo(f"Set {key}={value}")


@config.command()
def reset():
    """Reset configuration to defaults"""
    config_manager = get_config_manager()
    config_manager.reset()
    click.echo("Configuration reset to defaults")
