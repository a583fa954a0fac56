"""BaseViewModel: pure Python, no Qt dependency.

Concrete controllers subscribe to ``EventBus`` events through
:meth:`subscribe_event` and release them all in :meth:`dispose` when the view
is torn down.
"""

from __future__ import annotations

from typing import Callable, Type

from catalogview.events.bus import EventBus, Subscription


class BaseViewModel:
    """ViewModel base class tracking its bus subscriptions."""

    def __init__(self) -> None:
        self._subscriptions: list[tuple[EventBus, Subscription]] = []
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def subscribe_event(
        self,
        event_bus: EventBus,
        event_type: Type,
        handler: Callable,
    ) -> Subscription:
        """Subscribe to an event type and track the subscription."""
        sub = event_bus.subscribe(event_type, handler)
        self._subscriptions.append((event_bus, sub))
        return sub

    def dispose(self) -> None:
        """Unsubscribe from every tracked event."""
        for bus, sub in self._subscriptions:
            bus.unsubscribe(sub)
        self._subscriptions.clear()
        self._disposed = True
