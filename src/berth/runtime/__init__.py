"""Container runtime clients for berth."""

from berth.runtime.base import ContainerSummary, RuntimeClient, RuntimeClientError

__all__ = [
    "ContainerSummary",
    "RuntimeClient",
    "RuntimeClientError",
]
