"""Control plane: the operations offered to a presentation layer."""

from typing import Any, Dict, List, Optional

from ..models.config import DockpilotConfig
from ..models.container import ContainerRecord, VersionInfo
from ..models.operation import OperationOutcome, OperationRequest
from ..services.docker_service import DockerService
from ..services.exceptions import ContainerNotFoundError
from .container_directory import ContainerDirectory
from .launchers import BrowserLauncher, TerminalLauncher
from .log_relay import LogStreamRelay, LogSubscription, Sink
from .operation_dispatcher import OperationDispatcher


class ControlPlane:
    """Lists, inspects, operates on and streams logs of local containers.

    Every call takes a fresh snapshot of the runtime, so results never come
    from state captured at startup.

    Args:
        runtime: Runtime client. When omitted a DockerService is connected
            using ``config.docker_host``; if the daemon is unreachable the
            DockerServiceError propagates and no control plane exists.
        config: Settings; defaults when omitted
        browser: URL opener for open-web
        terminal: Terminal launcher for open-shell
    """

    def __init__(self, runtime=None, config: Optional[DockpilotConfig] = None,
                 browser=None, terminal=None):
        self.config = config or DockpilotConfig()
        self.runtime = runtime or DockerService(self.config.docker_host)
        self.directory = ContainerDirectory(self.runtime)
        self.dispatcher = OperationDispatcher(
            self.runtime,
            self.directory.lookup,
            browser or BrowserLauncher(),
            terminal or TerminalLauncher(self.config.terminal_command),
            web_host=self.config.web_host,
            exec_shell=self.config.exec_shell,
            stop_timeout=self.config.stop_timeout,
            force_delete=self.config.force_delete,
        )
        self.relay = LogStreamRelay(
            self.runtime,
            capacity=self.config.log_channel_capacity,
            tail=self.config.log_tail,
        )

    def __enter__(self) -> 'ControlPlane':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def list_containers(self) -> List[ContainerRecord]:
        """All containers, running or not, in runtime order."""
        return list(self.directory.refresh())

    def get_container(self, container_id: str) -> ContainerRecord:
        """Look a container up by id.

        Raises:
            ContainerNotFoundError: If no container has this id
        """
        record = self.directory.lookup(container_id)
        if record is None:
            raise ContainerNotFoundError(f"Container '{container_id}' not found")
        return record

    def resolve(self, reference: str) -> ContainerRecord:
        """Look a container up by id, name or unique id prefix.

        Raises:
            ContainerNotFoundError: If nothing or more than one container matches
        """
        record = self.directory.resolve(self.directory.refresh(), reference)
        if record is None:
            raise ContainerNotFoundError(f"Container '{reference}' not found")
        return record

    def inspect_container(self, container_id: str) -> Dict[str, Any]:
        """The runtime's inspect document for a container, unmodified."""
        record = self.get_container(container_id)
        return self.runtime.inspect_container(record.id)

    def get_version(self) -> VersionInfo:
        """Runtime version info, fetched on every call."""
        return VersionInfo.model_validate(self.runtime.version())

    def execute(self, container_id: str, operation: str) -> OperationOutcome:
        """Run a named operation; failures come back as the outcome."""
        return self.dispatcher.execute(OperationRequest.create(container_id, operation))

    def subscribe_logs(self, container_id: str, sink: Sink) -> LogSubscription:
        """Stream a container's logs into ``sink`` until cancelled or ended."""
        return self.relay.open(container_id, sink)

    def close(self) -> None:
        """Cancel every open log subscription."""
        self.relay.close()
