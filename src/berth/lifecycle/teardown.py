"""Removal of the named container."""

import logging
from enum import Enum
from typing import Optional

from berth.lifecycle.actions import LifecycleActions
from berth.lifecycle.inspector import StateInspector
from berth.runtime.base import RuntimeClient


logger = logging.getLogger(__name__)


class TeardownOutcome(Enum):
    """Result of an end request."""
    REMOVED = "removed"
    NOTHING_RUNNING = "nothing_running"


class TeardownOperation:
    """Stops and removes the named container whatever state it is in."""

    def __init__(
        self,
        runtime: RuntimeClient,
        inspector: Optional[StateInspector] = None,
        actions: Optional[LifecycleActions] = None,
    ):
        self.inspector = inspector or StateInspector(runtime)
        self.actions = actions or LifecycleActions(runtime)

    async def end(self, name: str) -> TeardownOutcome:
        observed = await self.inspector.inspect(name)

        if not observed.is_present:
            logger.info("No application is running")
            return TeardownOutcome.NOTHING_RUNNING

        await self.actions.stop_and_remove(observed.id)
        return TeardownOutcome.REMOVED
