"""Base runtime client interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from berth.errors import BerthError
from berth.models.container import PortBinding


class RuntimeClientError(BerthError):
    """Opaque failure reported by the container runtime or its transport."""
    pass


class ContainerSummary(BaseModel):
    """Listing record for a single container."""
    id: Optional[str] = None
    names: List[str] = Field(default_factory=list)
    image: Optional[str] = None
    state: Optional[str] = None

    class Config:
        """Pydantic config."""
        extra = "ignore"


class RuntimeClient(ABC):
    """Container runtime operations, addressed by container name or id."""

    @abstractmethod
    async def list_containers(
        self, name: str, include_all: bool = True, limit: Optional[int] = None
    ) -> List[ContainerSummary]:
        """List containers whose name is exactly ``name``."""
        pass

    @abstractmethod
    async def create_container(
        self,
        name: str,
        image: str,
        port_bindings: Dict[str, PortBinding],
        exposed_ports: List[str],
    ) -> str:
        """Create a container and return the id the runtime assigned."""
        pass

    @abstractmethod
    async def start_container(self, container_id: str) -> None:
        """Start a created or stopped container."""
        pass

    @abstractmethod
    async def stop_container(self, container_id: str) -> None:
        """Stop a running container."""
        pass

    @abstractmethod
    async def remove_container(self, container_id: str) -> None:
        """Remove a non-running container."""
        pass
