"""
Typed event bus for decoupled communication.

Event types are Enum members, never strings. Systems publish
state transitions (jump started, landed, animation looped);
the scene, debug overlay and tests subscribe to them.

Usage:
    class GameEvent(Enum):
        COIN_COLLECTED = auto()

    bus.subscribe(GameEvent.COIN_COLLECTED, on_coin)
    bus.publish(GameEvent.COIN_COLLECTED, value=10)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable


logger = logging.getLogger(__name__)


class EngineEvent(Enum):
    """Built-in engine events."""
    GAME_START = auto()
    GAME_PAUSE = auto()
    GAME_RESUME = auto()
    GAME_QUIT = auto()

    ENTITY_CREATED = auto()
    ENTITY_DESTROYED = auto()
    COMPONENT_ADDED = auto()
    COMPONENT_REMOVED = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: The event type (Enum member)
        data: Keyword data passed to publish
        consumed: Set by a handler to stop propagation
    """
    type: Enum
    data: dict[str, Any] = field(default_factory=dict)
    consumed: bool = False

    def consume(self) -> None:
        self.consumed = True

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]


EventHandler = Callable[[Event], None]


@dataclass
class _Subscription:
    priority: int
    handler: EventHandler
    one_shot: bool


class EventBus:
    """
    Publish/subscribe hub.

    Handlers run highest priority first. A handler may consume the
    event to stop lower-priority handlers. Events published from
    inside a handler are queued and dispatched after the current one.
    """

    def __init__(self):
        self._subscriptions: dict[Enum, list[_Subscription]] = {}
        self._queue: list[Event] = []
        self._dispatching = False

    def subscribe(
        self,
        event_type: Enum,
        handler: EventHandler,
        priority: int = 0,
        one_shot: bool = False,
    ) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to listen for
            handler: Callback(event)
            priority: Higher runs first; equal priorities keep subscription order
            one_shot: Drop the handler after its first call
        """
        subs = self._subscriptions.setdefault(event_type, [])
        index = len(subs)
        for i, sub in enumerate(subs):
            if priority > sub.priority:
                index = i
                break
        subs.insert(index, _Subscription(priority, handler, one_shot))

    def unsubscribe(self, event_type: Enum, handler: EventHandler) -> None:
        subs = self._subscriptions.get(event_type)
        if subs is None:
            return
        self._subscriptions[event_type] = [s for s in subs if s.handler != handler]

    def publish(self, event_type: Enum, **data: Any) -> Event:
        """
        Publish an event.

        Returns:
            The Event (check .consumed to see if it was handled)
        """
        event = Event(type=event_type, data=data)

        if self._dispatching:
            self._queue.append(event)
        else:
            self._dispatch(event)

        return event

    def clear(self, event_type: Enum | None = None) -> None:
        """Drop handlers for one event type, or all of them."""
        if event_type is None:
            self._subscriptions.clear()
        else:
            self._subscriptions.pop(event_type, None)

    def _dispatch(self, event: Event) -> None:
        subs = self._subscriptions.get(event.type)
        if subs:
            self._dispatching = True
            try:
                for sub in list(subs):
                    try:
                        sub.handler(event)
                    except Exception:
                        logger.exception("Error in event handler for %s", event.type)

                    if sub.one_shot and sub in subs:
                        subs.remove(sub)

                    if event.consumed:
                        break
            finally:
                self._dispatching = False

        while self._queue and not self._dispatching:
            self._dispatch(self._queue.pop(0))
