"""Custom exceptions for service layer."""


class ServiceError(Exception):
    """Base exception for all service-related errors."""

    pass


class DockerServiceError(ServiceError):
    """Exception raised for Docker service operations."""

    pass


class ContainerNotFoundError(DockerServiceError):
    """Exception raised when a Docker container is not found."""

    pass


class LaunchError(ServiceError):
    """Exception raised when a browser or terminal cannot be launched."""

    pass
