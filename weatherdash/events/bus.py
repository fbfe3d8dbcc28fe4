import asyncio
import inspect
from collections.abc import Callable
from typing import Any

from weatherdash.events.types import DashboardEvent
from weatherdash.shared.logging_mixin import LoggingMixin


class EventBus(LoggingMixin):
    def __init__(self):
        self._subscribers: dict[DashboardEvent, list[Callable]] = {
            event_type: [] for event_type in DashboardEvent
        }

    def subscribe(self, event_type: DashboardEvent, callback: Callable) -> None:
        self._subscribers[event_type].append(callback)

    def unsubscribe(self, event_type: DashboardEvent, callback: Callable) -> None:
        self._subscribers[event_type] = [
            cb for cb in self._subscribers[event_type] if cb != callback
        ]

    async def publish_async(self, event_type: DashboardEvent, data: Any = None) -> None:
        for callback in list(self._subscribers[event_type]):
            try:
                result = self._call_with_appropriate_args(callback, event_type, data)
                if asyncio.iscoroutine(result):
                    await result
            except Exception:
                self.logger.error(
                    "Error in callback %s for event %s",
                    getattr(callback, "__name__", callback),
                    event_type,
                    exc_info=True,
                )

    def _call_with_appropriate_args(
        self, callback: Callable, event: DashboardEvent, data: Any
    ) -> Any:
        sig = inspect.signature(callback)
        params = list(sig.parameters.values())

        if params and params[0].name == "self":
            params = params[1:]

        param_count = len(params)

        if param_count == 0:
            return callback()
        elif param_count == 1:
            return callback(data) if data is not None else callback(event)
        else:
            return callback(event, data)
