"""Container state and desired specification models."""

from enum import Enum
from typing import Dict, List, Optional, TYPE_CHECKING
from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from berth.models.config import BerthConfig


ALL_INTERFACES = "0.0.0.0"


class ContainerStatus(Enum):
    """Lifecycle stage of a container as reported by the runtime."""
    ABSENT = "absent"
    EMPTY = ""
    CREATED = "created"
    RUNNING = "running"
    RESTARTING = "restarting"
    REMOVING = "removing"
    PAUSED = "paused"
    EXITED = "exited"
    DEAD = "dead"

    @classmethod
    def from_runtime(cls, state: str) -> "ContainerStatus":
        """Map a runtime status string onto a status.

        ``absent`` is never reported by a runtime, it only describes a
        container that was not found.
        """
        status = cls(state.lower())
        if status is cls.ABSENT:
            raise ValueError(f"Invalid runtime status: {state!r}")
        return status


# Statuses in which the runtime refuses to remove a container without a stop.
ACTIVE_STATUSES = frozenset({ContainerStatus.RUNNING, ContainerStatus.RESTARTING})
INACTIVE_STATUSES = frozenset({
    ContainerStatus.CREATED,
    ContainerStatus.PAUSED,
    ContainerStatus.EXITED,
    ContainerStatus.DEAD,
})


class ObservedContainer(BaseModel):
    """Snapshot of the named container at the moment it was inspected."""
    name: str
    id: Optional[str] = None
    status: ContainerStatus = ContainerStatus.ABSENT

    @property
    def is_present(self) -> bool:
        return self.status is not ContainerStatus.ABSENT

    class Config:
        """Pydantic config."""
        frozen = True


class PortBinding(BaseModel):
    """Host side of a published container port."""
    host_ip: str = Field(default=ALL_INTERFACES)
    host_port: int = Field(..., ge=1, le=65535)

    class Config:
        """Pydantic config."""
        frozen = True


def image_name_with_version(name: str, version: str) -> str:
    """Return the fully qualified ``name:version`` image reference."""
    if not name:
        raise ValueError("Image name must not be empty")
    if not version:
        raise ValueError("Image version must not be empty")
    return f"{name}:{version}"


class DesiredSpec(BaseModel):
    """Image and port exposure the container must have after a run."""
    image_reference: str = Field(..., min_length=1)
    exposed_port: int = Field(..., ge=1, le=65535)
    host_bind_port: int = Field(..., ge=1, le=65535)
    host_ip: str = Field(default=ALL_INTERFACES)

    class Config:
        """Pydantic config."""
        frozen = True
        extra = "forbid"

    @classmethod
    def build(cls, name: str, config: "BerthConfig") -> "DesiredSpec":
        """Derive the desired spec for ``name`` from configuration.

        The container port is published on the same port of every host
        interface.
        """
        return cls(
            image_reference=image_name_with_version(name, config.version),
            exposed_port=config.port,
            host_bind_port=config.port,
        )

    @property
    def exposed_ports(self) -> List[str]:
        return [str(self.exposed_port)]

    @property
    def port_bindings(self) -> Dict[str, PortBinding]:
        return {
            str(self.exposed_port): PortBinding(
                host_ip=self.host_ip, host_port=self.host_bind_port
            )
        }
