"""Single-threaded pub/sub bus for screen settings."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

EventHandler = Callable[[Any], None]


@dataclass(slots=True)
class _Subscription:
    owner: object | None
    handler: EventHandler


class EventBus:
    """Ordered event bus with registrations keyed by owner identity.

    Everything runs on the caller's thread: ``emit`` invokes handlers inline,
    in the order they were subscribed, before returning.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Subscription]] = {}

    def subscribe(self, topic: str, handler: EventHandler, *, owner: object | None = None) -> None:
        """Register ``handler`` for ``topic``.

        With an ``owner``, a later subscription by the very same object
        replaces the earlier one in place. Without one, the same handler is
        only registered once.
        """
        subscriptions = self._subscribers.setdefault(topic, [])
        for index, existing in enumerate(subscriptions):
            if owner is not None and existing.owner is owner:
                subscriptions[index] = _Subscription(owner, handler)
                return
            if owner is None and existing.owner is None and existing.handler == handler:
                return
        subscriptions.append(_Subscription(owner, handler))

    def unsubscribe(self, topic: str, handler: EventHandler) -> None:
        subscriptions = self._subscribers.get(topic, [])
        self._subscribers[topic] = [s for s in subscriptions if s.handler != handler]

    def unsubscribe_owner(self, topic: str, owner: object) -> None:
        subscriptions = self._subscribers.get(topic, [])
        self._subscribers[topic] = [s for s in subscriptions if s.owner is not owner]

    def subscriber_count(self, topic: str) -> int:
        return len(self._subscribers.get(topic, ()))

    def emit(self, topic: str, payload: Any) -> None:
        handlers = [s.handler for s in self._subscribers.get(topic, ())]
        for handler in handlers:
            handler(payload)
