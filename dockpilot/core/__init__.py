"""Core components for dockpilot."""

from .container_directory import ContainerDirectory
from .control_plane import ControlPlane
from .launchers import BrowserLauncher, TerminalLauncher
from .log_relay import LogStreamRelay, LogStreamState, LogSubscription, SinkClosed
from .operation_dispatcher import OperationDispatcher

__all__ = [
    'ContainerDirectory',
    'ControlPlane',
    'BrowserLauncher',
    'TerminalLauncher',
    'LogStreamRelay',
    'LogStreamState',
    'LogSubscription',
    'SinkClosed',
    'OperationDispatcher',
]
