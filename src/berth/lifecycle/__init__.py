"""Container lifecycle: inspection, reconciliation and teardown."""

from berth.lifecycle.actions import LifecycleActions
from berth.lifecycle.inspector import StateInspector
from berth.lifecycle.reconciler import LifecycleReconciler
from berth.lifecycle.teardown import TeardownOperation, TeardownOutcome

__all__ = [
    "LifecycleActions",
    "StateInspector",
    "LifecycleReconciler",
    "TeardownOperation",
    "TeardownOutcome",
]
