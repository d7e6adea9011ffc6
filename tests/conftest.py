"""Shared fixtures: an in-memory container runtime."""

import itertools
from typing import Dict, List

import pytest

from berth.models.config import BerthConfig
from berth.models.container import DesiredSpec
from berth.runtime.base import ContainerSummary, RuntimeClient, RuntimeClientError


class FakeRuntimeClient(RuntimeClient):
    """Runtime keeping containers in a dict and recording every call in order.

    Like a real daemon it refuses a second container under a taken name and
    refuses to remove a running container.
    """

    def __init__(self):
        self.containers: Dict[str, dict] = {}
        self.calls: List[tuple] = []
        self.fail_on: set = set()
        # Number of listings for which a "removing" container stays visible
        self.removal_polls = 1
        # State a finished removal leaves behind; None drops the container
        self.removal_result = None
        self._ids = (f"c{n:04d}" for n in itertools.count(1))

    def add(self, name: str, state: str, image: str = "app:0.9") -> str:
        container_id = next(self._ids)
        self.containers[container_id] = {"name": name, "image": image, "state": state}
        return container_id

    def by_name(self, name: str) -> List[dict]:
        return [c for c in self.containers.values() if c["name"] == name]

    @property
    def lifecycle_calls(self) -> List[str]:
        return [call[0] for call in self.calls if call[0] != "list"]

    def _check(self, op: str):
        if op in self.fail_on:
            raise RuntimeClientError(f"{op} refused")

    async def list_containers(self, name, include_all=True, limit=None) -> List[ContainerSummary]:
        self.calls.append(("list", name, include_all, limit))
        self._check("list")
        found = []
        for container_id, c in list(self.containers.items()):
            if c["name"] != name:
                continue
            if not include_all and c["state"] != "running":
                continue
            if c["state"] == "removing":
                if self.removal_polls <= 0:
                    if self.removal_result is None:
                        del self.containers[container_id]
                        continue
                    c["state"] = self.removal_result
                else:
                    self.removal_polls -= 1
            found.append(ContainerSummary(id=container_id, names=[name], image=c["image"], state=c["state"]))
        return found[:limit] if limit else found

    async def create_container(self, name, image, port_bindings, exposed_ports) -> str:
        self.calls.append(("create", name, image))
        self._check("create")
        if self.by_name(name):
            raise RuntimeClientError(f'Conflict. The container name "/{name}" is already in use')
        container_id = self.add(name, "created", image)
        self.containers[container_id]["ports"] = (port_bindings, exposed_ports)
        return container_id

    async def start_container(self, container_id):
        self.calls.append(("start", container_id))
        self._check("start")
        self.containers[container_id]["state"] = "running"

    async def stop_container(self, container_id):
        self.calls.append(("stop", container_id))
        self._check("stop")
        self.containers[container_id]["state"] = "exited"

    async def remove_container(self, container_id):
        self.calls.append(("remove", container_id))
        self._check("remove")
        if self.containers[container_id]["state"] in ("running", "restarting"):
            raise RuntimeClientError("You cannot remove a running container")
        del self.containers[container_id]


@pytest.fixture
def runtime():
    """Empty in-memory runtime."""
    return FakeRuntimeClient()


@pytest.fixture
def config():
    """Configuration for an application named 'app'."""
    return BerthConfig(name="app", version="1.0", port=8080)


@pytest.fixture
def desired_spec(config):
    """Desired spec built from the config fixture."""
    return DesiredSpec.build(config.name, config)
