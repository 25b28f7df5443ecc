"""Publish/subscribe dispatch of game events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from termage.events import Event

EventCallback = Callable[[Event], None]


@dataclass
class _Subscription:
    id: int
    event_type: Optional[str]  # None subscribes to every type
    callback: EventCallback


class EventManager:
    """Queues events and delivers them to subscribers by type."""

    def __init__(self) -> None:
        self._subscriptions: List[_Subscription] = []
        self._pending: List[Event] = []
        self._next_id = 1

    def _add(self, event_type: Optional[str], callback: EventCallback) -> int:
        sub_id = self._next_id
        self._next_id += 1
        self._subscriptions.append(_Subscription(sub_id, event_type, callback))
        return sub_id

    def subscribe(self, event_type: str, callback: EventCallback) -> int:
        """Subscribe to one event type; returns an id for ``unsubscribe``."""
        return self._add(event_type, callback)

    def subscribe_all(self, callback: EventCallback) -> int:
        """Subscribe to every event; returns an id for ``unsubscribe``."""
        return self._add(None, callback)

    def unsubscribe(self, subscription_id: int) -> None:
        self._subscriptions = [s for s in self._subscriptions if s.id != subscription_id]

    def emit(self, event: Event) -> None:
        """Queue an event for the next ``process_events``."""
        self._pending.append(event)

    def process_events(self) -> None:
        """Deliver queued events; events emitted meanwhile wait for the next call."""
        pending, self._pending = self._pending, []
        for event in pending:
            self._dispatch(event)

    def dispatch_immediate(self, event: Event) -> None:
        self._dispatch(event)

    def clear_pending(self) -> None:
        self._pending.clear()

    def clear_subscriptions(self) -> None:
        self._subscriptions.clear()

    def pending_count(self) -> int:
        return len(self._pending)

    def _dispatch(self, event: Event) -> None:
        for sub in list(self._subscriptions):
            if sub.event_type is None or sub.event_type == event.type:
                sub.callback(event)