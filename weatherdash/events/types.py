from enum import Enum


class DashboardEvent(Enum):
    """Events published by the dashboard"""

    STATE_CHANGED = "state_changed"
    REQUEST_STARTED = "request_started"
    REQUEST_DISCARDED = "request_discarded"

    def __str__(self) -> str:
        return self.value
