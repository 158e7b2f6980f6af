from enum import Enum


class RuntimeState(Enum):
    """
    State of the most recent route call on a port
    """

    PENDING = "PENDING"
    RUNNING = "RUNNING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
