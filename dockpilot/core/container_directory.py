"""Point-in-time directory of the containers known to the runtime."""

import logging
from typing import Optional

from ..models.container import ContainerRecord, Snapshot

logger = logging.getLogger(__name__)


class ContainerDirectory:
    """Builds snapshots of the runtime's containers and looks records up in them.

    Snapshots are immutable tuples of frozen records, so they can be handed
    to any number of concurrent readers. Nothing is cached here: callers
    refresh whenever they need current data.
    """

    def __init__(self, runtime):
        self.runtime = runtime

    def refresh(self) -> Snapshot:
        """List every container, running or not, as a new snapshot.

        Raises:
            DockerServiceError: If the runtime cannot be reached. This is not
                swallowed; without the runtime there is nothing to serve.
        """
        containers = self.runtime.list_containers(all=True)
        snapshot = tuple(ContainerRecord.from_docker(c.attrs) for c in containers)
        logger.debug(f"Refreshed container snapshot: {len(snapshot)} container(s)")
        return snapshot

    @staticmethod
    def find(snapshot: Snapshot, container_id: str) -> Optional[ContainerRecord]:
        """Exact id match; the first match wins. None when absent."""
        for record in snapshot:
            if record.id == container_id:
                return record
        return None

    @staticmethod
    def resolve(snapshot: Snapshot, reference: str) -> Optional[ContainerRecord]:
        """Resolve a full id, a name or a unique id prefix to a record.

        Returns None when nothing matches or the prefix is ambiguous.
        """
        if not reference:
            return None

        record = ContainerDirectory.find(snapshot, reference)
        if record:
            return record

        name = reference.lstrip("/")
        for record in snapshot:
            if any(n.lstrip("/") == name for n in record.names):
                return record

        matching = [r for r in snapshot if r.id.startswith(reference)]
        if len(matching) == 1:
            return matching[0]
        return None

    def lookup(self, container_id: str) -> Optional[ContainerRecord]:
        """Find a container in a fresh snapshot."""
        return self.find(self.refresh(), container_id)
