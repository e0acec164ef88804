"""Service layer for abstracting Docker operations."""

from .docker_service import DockerService
from .exceptions import (
    ServiceError,
    DockerServiceError,
    ContainerNotFoundError,
    LaunchError,
)

__all__ = [
    "DockerService",
    "ServiceError",
    "DockerServiceError",
    "ContainerNotFoundError",
    "LaunchError",
]
