"""
Berth - single-container lifecycle management.

Keeps exactly one container of a versioned service image running under a
fixed name, recreating it whenever it is run again.
"""

__version__ = "1.0.0"

# Re-export key components for easier access
from berth.models.config import BerthConfig
from berth.models.container import ContainerStatus, DesiredSpec, ObservedContainer
from berth.lifecycle import LifecycleReconciler, StateInspector, TeardownOperation, TeardownOutcome

__all__ = [
    "BerthConfig",
    "ContainerStatus",
    "DesiredSpec",
    "ObservedContainer",
    "LifecycleReconciler",
    "StateInspector",
    "TeardownOperation",
    "TeardownOutcome",
]
