"""Dispatching lifecycle and launch operations against containers."""

import logging
from typing import Callable, Optional

from ..models.container import ContainerRecord
from ..models.operation import OperationKind, OperationOutcome, OperationRequest
from .constants import (
    DEFAULT_EXEC_SHELL,
    MSG_DELETED,
    MSG_INVALID_OPERATION,
    MSG_PORT_NOT_AVAILABLE,
    MSG_RESTARTED,
    MSG_STARTED,
    MSG_STOPPED,
    SHELL_COMMAND_TEMPLATE,
)

logger = logging.getLogger(__name__)

Lookup = Callable[[str], Optional[ContainerRecord]]


class OperationDispatcher:
    """Runs an OperationRequest and reduces the result to an OperationOutcome.

    Errors from the runtime, the lookup or a launcher never leave ``execute``;
    they become failed outcomes carrying the error text. Nothing is rolled back: a restart whose
    start fails after a successful stop leaves the container stopped.

    Args:
        runtime: Runtime client (see DockerService)
        lookup: Resolves a container id to a record, None when unknown. Only
            open-web and open-shell need it.
        browser: Object with ``open(url)``
        terminal: Object with ``open_shell(command)``
        web_host: Host used in open-web URLs
        exec_shell: Shell started by open-shell
        stop_timeout: Seconds given to a container to stop
        force_delete: Remove running containers too
    """

    def __init__(self, runtime, lookup: Lookup, browser, terminal,
                 web_host: str = "0.0.0.0", exec_shell: str = DEFAULT_EXEC_SHELL,
                 stop_timeout: Optional[int] = None, force_delete: bool = False):
        self.runtime = runtime
        self.lookup = lookup
        self.browser = browser
        self.terminal = terminal
        self.web_host = web_host
        self.exec_shell = exec_shell
        self.stop_timeout = stop_timeout
        self.force_delete = force_delete
        self._handlers = {
            OperationKind.START: self._start,
            OperationKind.STOP: self._stop,
            OperationKind.RESTART: self._restart,
            OperationKind.DELETE: self._delete,
            OperationKind.OPEN_WEB: self._open_web,
            OperationKind.OPEN_SHELL: self._open_shell,
            OperationKind.INVALID: self._invalid,
        }

    def execute(self, request: OperationRequest) -> OperationOutcome:
        """Execute one operation and always return an outcome."""
        handler = self._handlers[request.kind]
        outcome = handler(request.container_id)
        if outcome.success:
            logger.info(f"{request.kind.value} {request.container_id[:12]}: {outcome.message}")
        else:
            logger.debug(f"{request.kind.value} {request.container_id[:12]} failed: {outcome.message}")
        return outcome

    def _start(self, container_id: str) -> OperationOutcome:
        try:
            self.runtime.start_container(container_id)
        except Exception as e:
            return OperationOutcome.failed(f"Failed to start container: {e}")
        return OperationOutcome.ok(MSG_STARTED)

    def _stop(self, container_id: str) -> OperationOutcome:
        try:
            self.runtime.stop_container(container_id, timeout=self.stop_timeout)
        except Exception as e:
            return OperationOutcome.failed(f"Failed to stop container: {e}")
        return OperationOutcome.ok(MSG_STOPPED)

    def _delete(self, container_id: str) -> OperationOutcome:
        try:
            self.runtime.remove_container(container_id, force=self.force_delete)
        except Exception as e:
            return OperationOutcome.failed(f"Failed to delete container: {e}")
        return OperationOutcome.ok(MSG_DELETED)

    def _restart(self, container_id: str) -> OperationOutcome:
        # Best-effort stop: only the start decides the outcome
        stopped = self._stop(container_id)
        if not stopped.success:
            logger.debug(f"Ignoring stop failure during restart: {stopped.message}")

        try:
            self.runtime.start_container(container_id)
        except Exception as e:
            return OperationOutcome.failed(f"Failed to restart container: {e}")
        return OperationOutcome.ok(MSG_RESTARTED)

    def _resolve(self, container_id: str):
        """Return (record, None) or (None, failed outcome)."""
        try:
            record = self.lookup(container_id)
        except Exception as e:
            return None, OperationOutcome.failed(f"Failed to look up container: {e}")
        if record is None:
            return None, OperationOutcome.failed(f"Container '{container_id}' not found")
        return record, None

    def _open_web(self, container_id: str) -> OperationOutcome:
        record, failure = self._resolve(container_id)
        if failure:
            return failure

        if not record.ports or record.ports[0].public_port is None:
            return OperationOutcome.failed(f"Cannot open web page: {MSG_PORT_NOT_AVAILABLE}")

        url = f"http://{self.web_host}:{record.ports[0].public_port}"
        try:
            self.browser.open(url)
        except Exception as e:
            return OperationOutcome.failed(f"An error occurred when opening '{url}': {e}")
        return OperationOutcome.ok(f"Opening '{url}'.")

    def _open_shell(self, container_id: str) -> OperationOutcome:
        record, failure = self._resolve(container_id)
        if failure:
            return failure

        command = SHELL_COMMAND_TEMPLATE.format(name=record.name, shell=self.exec_shell)
        try:
            self.terminal.open_shell(command)
        except Exception as e:
            return OperationOutcome.failed(f"Cannot run exec command: {e}")
        return OperationOutcome.ok(f"Opening shell in '{record.name}'.")

    def _invalid(self, container_id: str) -> OperationOutcome:
        return OperationOutcome.failed(MSG_INVALID_OPERATION)
