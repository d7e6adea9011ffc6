"""Runtime client backed by the Docker Engine API."""

import asyncio
import logging
import re
from typing import Dict, List, Optional

import docker
from docker.errors import DockerException

from berth.models.container import PortBinding
from berth.runtime.base import ContainerSummary, RuntimeClient, RuntimeClientError


logger = logging.getLogger(__name__)


class DockerRuntimeClient(RuntimeClient):
    """Runtime client using the docker SDK.

    The SDK is synchronous, so every call runs in a worker thread.
    """

    def __init__(self, docker_host: Optional[str] = None):
        """Connect to the Docker daemon.

        Args:
            docker_host: Docker host URL (e.g., 'unix:///var/run/docker.sock').
                         If None, uses DOCKER_HOST env var or default socket.
        """
        try:
            if docker_host:
                self._client = docker.DockerClient(base_url=docker_host)
            else:
                self._client = docker.from_env()
        except DockerException as e:
            raise RuntimeClientError(f"Cannot connect to Docker daemon: {e}") from e

    @property
    def api(self):
        """Low-level API client."""
        return self._client.api

    async def _call(self, func, *args, **kwargs):
        """Run a blocking SDK call in a thread, normalising its errors."""
        try:
            return await asyncio.to_thread(func, *args, **kwargs)
        except DockerException as e:
            raise RuntimeClientError(str(e)) from e

    async def list_containers(
        self, name: str, include_all: bool = True, limit: Optional[int] = None
    ) -> List[ContainerSummary]:
        # Docker matches name filters as a regex against "/<name>"
        filters = {"name": f"^/{re.escape(name)}$"}
        raw = await self._call(
            self.api.containers,
            all=include_all,
            limit=limit if limit is not None else -1,
            filters=filters,
        )
        logger.debug(f"Listed {len(raw)} container(s) matching {name}")
        return [
            ContainerSummary(
                id=item.get("Id"),
                names=[n.lstrip("/") for n in item.get("Names") or []],
                image=item.get("Image"),
                state=item.get("State"),
            )
            for item in raw
        ]

    async def create_container(
        self,
        name: str,
        image: str,
        port_bindings: Dict[str, PortBinding],
        exposed_ports: List[str],
    ) -> str:
        try:
            host_config = self.api.create_host_config(
                port_bindings={
                    port: (binding.host_ip, binding.host_port)
                    for port, binding in port_bindings.items()
                }
            )
        except DockerException as e:
            raise RuntimeClientError(str(e)) from e
        response = await self._call(
            self.api.create_container,
            image=image,
            name=name,
            ports=list(exposed_ports),
            host_config=host_config,
        )
        for warning in response.get("Warnings") or []:
            logger.warning(f"Docker: {warning}")
        container_id = response.get("Id")
        if not container_id:
            raise RuntimeClientError(f"Docker returned no id for container {name}")
        return container_id

    async def start_container(self, container_id: str) -> None:
        await self._call(self.api.start, container_id)

    async def stop_container(self, container_id: str) -> None:
        # The engine answers 304 for an already stopped container, which is not an error
        await self._call(self.api.stop, container_id)

    async def remove_container(self, container_id: str) -> None:
        await self._call(self.api.remove_container, container_id)
