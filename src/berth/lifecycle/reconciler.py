"""Convergence of the named container onto the desired image."""

import asyncio
import logging
from typing import Optional

from berth.lifecycle.actions import LifecycleActions
from berth.lifecycle.inspector import StateInspector
from berth.models.container import (
    ACTIVE_STATUSES,
    INACTIVE_STATUSES,
    ContainerStatus,
    DesiredSpec,
    ObservedContainer,
)
from berth.runtime.base import RuntimeClient


logger = logging.getLogger(__name__)


class LifecycleReconciler:
    """Replaces whatever container holds the name with one built from the desired spec.

    A container's image is fixed when it is created, so an existing
    container is never reused: it is cleared out of the way and a fresh one
    is created and started. Any failed step aborts the run and leaves the
    runtime as it is.
    """

    def __init__(
        self,
        runtime: RuntimeClient,
        removal_timeout: float = 30.0,
        poll_interval: float = 0.5,
        inspector: Optional[StateInspector] = None,
        actions: Optional[LifecycleActions] = None,
    ):
        self.inspector = inspector or StateInspector(runtime)
        self.actions = actions or LifecycleActions(runtime)
        self.removal_timeout = removal_timeout
        self.poll_interval = poll_interval

    async def run(self, name: str, spec: DesiredSpec) -> str:
        """Converge ``name`` onto ``spec`` and return the new container id."""
        observed = await self.inspector.inspect(name)

        if observed.is_present:
            logger.info(f"Found container {name} ({observed.id}) in state {observed.status.name.lower()}")
            await self._clear(observed)
        else:
            logger.debug(f"Container {name} is absent, creating")

        container_id = await self.actions.create(name, spec)
        await self.actions.start(container_id)
        return container_id

    async def _clear(self, observed: ObservedContainer) -> None:
        """Get an existing container out of the way of a new one."""
        status = observed.status

        if status in ACTIVE_STATUSES:
            await self.actions.stop_and_remove(observed.id)
        elif status in INACTIVE_STATUSES:
            await self.actions.remove(observed.id)
        elif status is ContainerStatus.REMOVING:
            await self._wait_for_removal(observed.name)
        elif status is ContainerStatus.EMPTY:
            logger.warning(f"Container {observed.name} reports no status, creating without cleanup")
        else:
            raise ValueError(f"Cannot clear container in state {status}")

    async def _wait_for_removal(self, name: str) -> None:
        """Poll until the runtime finishes removing ``name`` or the timeout passes."""
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.removal_timeout

        while loop.time() < deadline:
            await asyncio.sleep(self.poll_interval)
            observed = await self.inspector.inspect(name)
            if not observed.is_present:
                logger.debug(f"Container {name} finished removal")
                return
            if observed.status is not ContainerStatus.REMOVING:
                # A failed removal leaves the container dead, still holding the name
                logger.warning(f"Container {name} left removal in state {observed.status.name.lower()}")
                await self._clear(observed)
                return

        logger.warning(f"Container {name} is still being removed after {self.removal_timeout}s")
