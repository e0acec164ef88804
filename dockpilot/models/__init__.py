"""Models for dockpilot."""

from .config import DockpilotConfig
from .container import ContainerRecord, PortMapping, Snapshot, VersionInfo
from .operation import OperationKind, OperationOutcome, OperationRequest

__all__ = [
    'DockpilotConfig',
    'ContainerRecord',
    'PortMapping',
    'Snapshot',
    'VersionInfo',
    'OperationKind',
    'OperationOutcome',
    'OperationRequest',
]
