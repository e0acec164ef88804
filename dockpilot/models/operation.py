"""Container operation models."""
from dataclasses import dataclass
from enum import Enum


class OperationKind(Enum):
    """Operations that can be executed against a container."""
    START = "start"
    STOP = "stop"
    RESTART = "restart"
    DELETE = "delete"
    OPEN_WEB = "open-web"
    OPEN_SHELL = "open-shell"
    INVALID = "invalid"

    @classmethod
    def parse(cls, value: str) -> 'OperationKind':
        """Map an operation tag to a kind, INVALID when it is not recognised."""
        tag = (value or "").strip().lower()
        if tag in _ALIASES:
            return _ALIASES[tag]
        try:
            kind = cls(tag)
        except ValueError:
            return cls.INVALID
        return kind


# Tags used by older front ends
_ALIASES = {
    "web": OperationKind.OPEN_WEB,
    "exec": OperationKind.OPEN_SHELL,
    "shell": OperationKind.OPEN_SHELL,
    "rm": OperationKind.DELETE,
}


@dataclass(frozen=True)
class OperationRequest:
    """An operation to run against one container."""
    container_id: str
    kind: OperationKind

    @classmethod
    def create(cls, container_id: str, operation: str) -> 'OperationRequest':
        return cls(container_id=container_id, kind=OperationKind.parse(operation))


@dataclass(frozen=True)
class OperationOutcome:
    """Result of an operation: a flag plus a short user-facing message."""
    success: bool
    message: str

    @classmethod
    def ok(cls, message: str) -> 'OperationOutcome':
        return cls(success=True, message=message)

    @classmethod
    def failed(cls, message: str) -> 'OperationOutcome':
        return cls(success=False, message=message)
