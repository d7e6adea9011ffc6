"""Individual lifecycle steps against the runtime."""

import logging

from berth.errors import CreateError, RemoveError, StartError, StopError
from berth.models.container import DesiredSpec
from berth.runtime.base import RuntimeClient, RuntimeClientError


logger = logging.getLogger(__name__)


class LifecycleActions:
    """Runs one runtime call per step and reports each completed step."""

    def __init__(self, runtime: RuntimeClient):
        self.runtime = runtime

    async def create(self, name: str, spec: DesiredSpec) -> str:
        """Create the named container from ``spec`` and return its id."""
        try:
            container_id = await self.runtime.create_container(
                name=name,
                image=spec.image_reference,
                port_bindings=spec.port_bindings,
                exposed_ports=spec.exposed_ports,
            )
        except RuntimeClientError as e:
            logger.error(f"Failed to create container {name}: {e}")
            raise CreateError(name, str(e)) from e
        logger.info(f"Created container with id: {container_id}")
        return container_id

    async def start(self, container_id: str) -> None:
        try:
            await self.runtime.start_container(container_id)
        except RuntimeClientError as e:
            logger.error(f"Failed to start container {container_id}: {e}")
            raise StartError(container_id, str(e)) from e
        logger.info(f"Started container with id: {container_id}")

    async def stop(self, container_id: str) -> None:
        try:
            await self.runtime.stop_container(container_id)
        except RuntimeClientError as e:
            logger.error(f"Failed to stop container {container_id}: {e}")
            raise StopError(container_id, str(e)) from e
        logger.info(f"Stopped container with id: {container_id}")

    async def remove(self, container_id: str) -> None:
        try:
            await self.runtime.remove_container(container_id)
        except RuntimeClientError as e:
            logger.error(f"Failed to remove container {container_id}: {e}")
            raise RemoveError(container_id, str(e)) from e
        logger.info(f"Removed container with id: {container_id}")

    async def stop_and_remove(self, container_id: str) -> None:
        """Stop the container, then remove it once the stop has completed."""
        await self.stop(container_id)
        await self.remove(container_id)
