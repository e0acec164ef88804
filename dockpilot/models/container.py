"""Container data models."""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class PortMapping(BaseModel):
    """A port published by a container."""
    model_config = ConfigDict(frozen=True)

    private_port: int
    protocol: str = "tcp"
    public_port: Optional[int] = None
    ip: Optional[str] = None

    @classmethod
    def from_docker(cls, data: Dict[str, Any]) -> 'PortMapping':
        """Create from a Docker list port entry."""
        return cls(
            private_port=data["PrivatePort"],
            protocol=data.get("Type", "tcp"),
            public_port=data.get("PublicPort"),
            ip=data.get("IP"),
        )

    def __str__(self) -> str:
        if self.public_port is None:
            return f"{self.private_port}/{self.protocol}"
        return f"{self.public_port}->{self.private_port}/{self.protocol}"


class ContainerRecord(BaseModel):
    """A container as reported by the runtime at snapshot time.

    Records are frozen; a refresh produces new records instead of updating
    old ones.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    names: Tuple[str, ...] = ()
    image: str = ""
    state: str = ""
    status: str = ""
    created: Optional[int] = None
    ports: Tuple[PortMapping, ...] = ()

    @classmethod
    def from_docker(cls, attrs: Dict[str, Any]) -> 'ContainerRecord':
        """Create from a Docker container list descriptor."""
        return cls(
            id=attrs["Id"],
            names=tuple(attrs.get("Names") or ()),
            image=attrs.get("Image", ""),
            state=attrs.get("State", ""),
            status=attrs.get("Status", ""),
            created=attrs.get("Created"),
            ports=tuple(PortMapping.from_docker(p) for p in attrs.get("Ports") or ()),
        )

    @property
    def short_id(self) -> str:
        return self.id[:12]

    @property
    def name(self) -> str:
        """First display name without its leading slash."""
        if not self.names:
            return self.short_id
        return self.names[0].lstrip("/")


# An ordered, immutable view of the containers at one instant
Snapshot = Tuple[ContainerRecord, ...]


class VersionInfo(BaseModel):
    """Runtime version and build metadata."""
    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    version: str = Field(default="", alias="Version")
    api_version: str = Field(default="", alias="ApiVersion")
    min_api_version: Optional[str] = Field(default=None, alias="MinAPIVersion")
    git_commit: str = Field(default="", alias="GitCommit")
    go_version: str = Field(default="", alias="GoVersion")
    os: str = Field(default="", alias="Os")
    arch: str = Field(default="", alias="Arch")
    kernel_version: Optional[str] = Field(default=None, alias="KernelVersion")
    build_time: Optional[str] = Field(default=None, alias="BuildTime")
