"""Docker service for abstracting Docker operations."""

import logging
from typing import Any, Optional

import docker
import docker.errors
from docker.models.containers import Container

from .exceptions import (
    ContainerNotFoundError,
    DockerServiceError,
)

logger = logging.getLogger(__name__)


def _explain(error: Exception) -> str:
    """Return the daemon's explanation for an API error, or the error text."""
    explanation = getattr(error, "explanation", None)
    if explanation:
        return str(explanation)
    return str(error)


class DockerService:
    """Service for Docker operations with clean abstractions.

    This is the only place that talks to the docker SDK. Every SDK error is
    translated into a DockerServiceError (or ContainerNotFoundError) so the
    rest of the application never sees docker exceptions.
    """

    def __init__(self, base_url: Optional[str] = None):
        """Connect to the Docker daemon and test the connection.

        Args:
            base_url: Daemon endpoint, e.g. ``unix:///var/run/docker.sock``.
                When omitted the endpoint is read from the environment.

        Raises:
            DockerServiceError: If the daemon cannot be reached
        """
        try:
            if base_url:
                self.client = docker.DockerClient(base_url=base_url)
            else:
                self.client = docker.from_env()
            self.client.ping()
        except docker.errors.DockerException as e:
            if "connection refused" in str(e).lower() or "cannot connect" in str(e).lower():
                raise DockerServiceError(
                    "Docker daemon is not running. Please start Docker Desktop or the Docker service."
                ) from e
            else:
                raise DockerServiceError(f"Failed to connect to Docker: {e}") from e

    def list_containers(self, all: bool = True) -> list[Container]:
        """List containers.

        Containers are returned sparse: their ``attrs`` hold the daemon's list
        descriptor (Id, Names, Image, Ports, State, Status, Created).

        Args:
            all: Include stopped containers

        Returns:
            List of containers

        Raises:
            DockerServiceError: If listing fails
        """
        try:
            return self.client.containers.list(all=all, sparse=True)
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to list containers: {e}") from e
        except Exception as e:
            raise DockerServiceError(f"Unexpected error listing containers: {e}") from e

    def get_container(self, container_id: str) -> Container:
        """Get a container by ID or name.

        Args:
            container_id: Container ID or name

        Returns:
            Container object

        Raises:
            ContainerNotFoundError: If container not found
            DockerServiceError: If retrieval fails
        """
        try:
            return self.client.containers.get(container_id)
        except docker.errors.NotFound as e:
            raise ContainerNotFoundError(
                f"Container '{container_id}' not found"
            ) from e
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to get container: {e}") from e
        except Exception as e:
            raise DockerServiceError(f"Unexpected error getting container: {e}") from e

    def inspect_container(self, container_id: str) -> dict[str, Any]:
        """Return the full inspect document of a container.

        Raises:
            ContainerNotFoundError: If container not found
            DockerServiceError: If retrieval fails
        """
        return self.get_container(container_id).attrs

    def start_container(self, container_id: str) -> None:
        """Start a container.

        Args:
            container_id: Container ID or name

        Raises:
            ContainerNotFoundError: If container not found
            DockerServiceError: If the daemon refuses; the message is the
                daemon's explanation
        """
        container = self.get_container(container_id)
        try:
            container.start()
        except docker.errors.APIError as e:
            raise DockerServiceError(_explain(e)) from e
        except Exception as e:
            raise DockerServiceError(f"Unexpected error starting container: {e}") from e
        logger.info(f"Started container: {container_id}")

    def stop_container(self, container_id: str, timeout: Optional[int] = None) -> None:
        """Stop a container.

        Args:
            container_id: Container ID or name
            timeout: Seconds to wait before killing the container

        Raises:
            ContainerNotFoundError: If container not found
            DockerServiceError: If the daemon refuses
        """
        container = self.get_container(container_id)
        try:
            if timeout is None:
                container.stop()
            else:
                container.stop(timeout=timeout)
        except docker.errors.APIError as e:
            raise DockerServiceError(_explain(e)) from e
        except Exception as e:
            raise DockerServiceError(f"Unexpected error stopping container: {e}") from e
        logger.info(f"Stopped container: {container_id}")

    def remove_container(self, container_id: str, force: bool = False) -> None:
        """Remove a container.

        Args:
            container_id: Container ID or name
            force: Force remove even if running

        Raises:
            ContainerNotFoundError: If container not found
            DockerServiceError: If removal fails
        """
        container = self.get_container(container_id)
        try:
            container.remove(force=force)
        except docker.errors.NotFound as e:
            raise ContainerNotFoundError(f"Container '{container_id}' not found") from e
        except docker.errors.APIError as e:
            raise DockerServiceError(_explain(e)) from e
        except Exception as e:
            raise DockerServiceError(f"Unexpected error removing container: {e}") from e
        logger.info(f"Removed container: {container_id}")

    def stream_logs(self, container_id: str, tail: Any = "all"):
        """Open a follow-mode log stream for a container.

        Args:
            container_id: Container ID or name
            tail: Number of history lines to start with, or "all"

        Returns:
            A lazy iterator of raw log bytes. It has a ``close()`` method that
            releases the connection and ends the iteration.

        Raises:
            ContainerNotFoundError: If container not found
            DockerServiceError: If the stream cannot be opened
        """
        container = self.get_container(container_id)
        try:
            return container.logs(stream=True, follow=True, tail=tail)
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to stream logs: {_explain(e)}") from e
        except Exception as e:
            raise DockerServiceError(f"Unexpected error streaming logs: {e}") from e

    def version(self) -> dict[str, Any]:
        """Return the daemon's version and build metadata.

        Raises:
            DockerServiceError: If the daemon cannot be queried
        """
        try:
            return self.client.version()
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to get version: {e}") from e
        except Exception as e:
            raise DockerServiceError(f"Unexpected error getting version: {e}") from e
