from .bus import EventBus
from .types import DashboardEvent

__all__ = ["EventBus", "DashboardEvent"]
