"""Observation of the named container's current state."""

import logging

from berth.errors import InspectionError, MissingFieldError
from berth.models.container import ContainerStatus, ObservedContainer
from berth.runtime.base import RuntimeClient, RuntimeClientError


logger = logging.getLogger(__name__)


class StateInspector:
    """Looks up the container bearing a given name."""

    def __init__(self, runtime: RuntimeClient):
        self.runtime = runtime

    async def inspect(self, name: str) -> ObservedContainer:
        """Return the current identity and status of ``name``.

        Stopped and created containers are included in the lookup; a
        container that does not exist is reported as absent rather than
        raising.
        """
        try:
            summaries = await self.runtime.list_containers(name, include_all=True, limit=1)
        except RuntimeClientError as e:
            raise InspectionError(f"Failed to list containers named {name}: {e}") from e

        if not summaries:
            logger.debug(f"No container named {name}")
            return ObservedContainer(name=name)

        summary = summaries[0]
        if not summary.id:
            raise MissingFieldError(f"Container {name} was listed without an id")
        if summary.state is None:
            raise MissingFieldError(f"Container {name} was listed without a status")

        try:
            status = ContainerStatus.from_runtime(summary.state)
        except ValueError as e:
            raise InspectionError(
                f"Container {name} has unrecognised status {summary.state!r}"
            ) from e

        logger.debug(f"Container {name} ({summary.id}) is {status.name.lower()}")
        return ObservedContainer(name=name, id=summary.id, status=status)
