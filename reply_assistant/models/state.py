"""Form operation state."""

from enum import Enum


class OperationState(Enum):
    """Lifecycle of the form's request/response cycle."""
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"
