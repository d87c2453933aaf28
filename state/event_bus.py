"""Simple publish/subscribe event bus connecting the HUD to the game."""
from __future__ import annotations

import inspect
from collections import defaultdict
from typing import Any, Callable, Dict, List, Union
from weakref import WeakMethod

EventCallback = Callable[..., None]
Subscriber = Union[EventCallback, WeakMethod]


class EventBus:
    """Minimalistic event dispatcher.

    Subscribers register callbacks for string based event identifiers.  When an
    event is published all callbacks for that name are invoked synchronously
    with the supplied arguments.  Bound methods are held weakly so widgets can
    be discarded without unsubscribing; publishing an event nobody listens to
    does nothing.
    """

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[Subscriber]] = defaultdict(list)

    def subscribe(self, event: str, callback: EventCallback) -> None:
        """Register ``callback`` to be invoked when ``event`` is published."""

        if inspect.ismethod(callback):
            self._subscribers[event].append(WeakMethod(callback))
        else:
            self._subscribers[event].append(callback)

    def unsubscribe(self, event: str, callback: EventCallback) -> None:
        subs = self._subscribers.get(event, [])
        for cb in list(subs):
            target = cb() if isinstance(cb, WeakMethod) else cb
            if target is None or target == callback:
                subs.remove(cb)

    def publish(self, event: str, *args: Any, **kwargs: Any) -> None:
        """Invoke all callbacks subscribed to ``event``."""

        subs = self._subscribers.get(event, [])
        for cb in list(subs):
            if isinstance(cb, WeakMethod):
                func = cb()
                if func is None:
                    subs.remove(cb)
                    continue
                func(*args, **kwargs)
            else:
                cb(*args, **kwargs)

    def reset(self) -> None:
        """Drop every subscription."""
        self._subscribers.clear()


# Global bus instance used by modules -----------------------------------
EVENT_BUS = EventBus()

# Event name constants ---------------------------------------------------
# Published with a single ``Dict[str, bool]`` of movement keys
ON_MOVEMENT_INPUT = "on_movement_input"
ON_SPRINT_CHANGED = "on_sprint_changed"
ON_TOGGLE_INVENTORY = "on_toggle_inventory"
ON_PLAYER_DIED = "on_player_died"
