"""Pydantic models for configuration and container state."""

from berth.models.config import BerthConfig, RuntimeConfig
from berth.models.container import (
    ContainerStatus,
    DesiredSpec,
    ObservedContainer,
    PortBinding,
    image_name_with_version,
)

__all__ = [
    "BerthConfig",
    "RuntimeConfig",
    "ContainerStatus",
    "DesiredSpec",
    "ObservedContainer",
    "PortBinding",
    "image_name_with_version",
]
