"""Error hierarchy for container lifecycle operations."""


class BerthError(Exception):
    """Base error for failures that abort a lifecycle operation."""
    pass


class ConfigError(BerthError):
    """Configuration could not be loaded or is invalid."""
    pass


class InspectionError(BerthError):
    """Listing the named container failed."""
    pass


class MissingFieldError(InspectionError):
    """The runtime returned a container summary without an id or status."""
    pass


class LifecycleError(BerthError):
    """A lifecycle transition was rejected by the runtime."""

    action = "modify"

    def __init__(self, container: str, reason: str = ""):
        self.container = container
        self.reason = reason
        message = f"Failed to {self.action} container {container}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CreateError(LifecycleError):
    action = "create"


class StartError(LifecycleError):
    action = "start"


class StopError(LifecycleError):
    action = "stop"


class RemoveError(LifecycleError):
    action = "remove"
