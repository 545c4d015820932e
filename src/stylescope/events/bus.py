"""Synchronous event bus for tracker lifecycle events."""

from typing import Any, Callable


class EventBus:
    """Publish-subscribe bus for stylesheet lifecycle notifications.

    Listeners register per event type or for every event. Dispatch is
    synchronous, on the task that emits, in registration order.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Callable]] = {}
        self._global_listeners: list[Callable] = []

    def subscribe(self, event_type: type, callback: Callable) -> Callable:
        """Register *callback* for *event_type* and return it."""
        self._listeners.setdefault(event_type, []).append(callback)
        return callback

    def on_all(self, callback: Callable) -> Callable:
        """Register a callback that receives every event."""
        self._global_listeners.append(callback)
        return callback

    def emit(self, event: Any) -> int:
        """Dispatch *event* and return how many listeners received it."""
        targets = [*self._global_listeners, *self._listeners.get(type(event), [])]
        for cb in targets:
            cb(event)
        return len(targets)
