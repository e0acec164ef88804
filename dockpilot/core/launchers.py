"""Launching host applications: the web browser and a terminal."""

import logging
import subprocess
import sys
from typing import List, Optional

import click

from ..services.exceptions import LaunchError

logger = logging.getLogger(__name__)


class BrowserLauncher:
    """Opens URLs in the user's default browser."""

    def open(self, url: str) -> None:
        """Open a URL.

        Raises:
            LaunchError: If the browser could not be started
        """
        try:
            exit_code = click.launch(url)
        except OSError as e:
            raise LaunchError(str(e)) from e
        if exit_code:
            raise LaunchError(f"browser exited with status {exit_code}")
        logger.info(f"Opened {url}")


def default_terminal_command(platform: Optional[str] = None) -> List[str]:
    """Terminal argv template for a platform; ``{command}`` is the shell command."""
    platform = platform or sys.platform
    if platform.startswith("darwin"):
        return ["osascript", "-e", 'tell application "Terminal" to do script "{command}"']
    if platform.startswith("win"):
        return ["cmd", "/c", "start", "cmd", "/k", "{command}"]
    return ["gnome-terminal", "--", "bash", "-c", "{command}"]


class TerminalLauncher:
    """Runs a command in a new interactive terminal window."""

    def __init__(self, command_template: Optional[List[str]] = None,
                 platform: Optional[str] = None):
        self.command_template = command_template or default_terminal_command(platform)

    def build_argv(self, command: str) -> List[str]:
        return [part.replace("{command}", command) for part in self.command_template]

    def open_shell(self, command: str) -> None:
        """Spawn the terminal without waiting for it.

        Raises:
            LaunchError: If the terminal program could not be started
        """
        argv = self.build_argv(command)
        try:
            subprocess.Popen(argv)
        except OSError as e:
            raise LaunchError(str(e)) from e
        logger.info(f"Launched terminal: {argv[0]}")
