from __future__ import annotations

"""Normalise pygame mouse and touch events into pointer events.

Touch widgets only care about "a pointer went down / moved / went up at this
pixel".  Finger events report coordinates normalised to ``[0, 1]`` and are
scaled to the window here; mouse events use pointer id :data:`MOUSE_ID`.
Mouse events that SDL synthesises from touches are dropped so a finger is
never seen twice.
"""

from typing import NamedTuple, Optional, Tuple

import pygame

# Event type fallbacks for pygame builds without touch support
MOUSEBUTTONDOWN = getattr(pygame, "MOUSEBUTTONDOWN", 1025)
MOUSEBUTTONUP = getattr(pygame, "MOUSEBUTTONUP", 1026)
MOUSEMOTION = getattr(pygame, "MOUSEMOTION", 1024)
FINGERDOWN = getattr(pygame, "FINGERDOWN", 1792)
FINGERUP = getattr(pygame, "FINGERUP", 1793)
FINGERMOTION = getattr(pygame, "FINGERMOTION", 1794)
WINDOWLEAVE = getattr(pygame, "WINDOWLEAVE", 32784)

MOUSE_ID = -1

DOWN = "down"
MOVE = "move"
UP = "up"
LOST = "lost"


class PointerEvent(NamedTuple):
    kind: str
    pos: Tuple[float, float]
    pointer_id: int


def to_pointer_event(
    evt: object, window_size: Tuple[int, int]
) -> Optional[PointerEvent]:
    """Return the pointer event described by ``evt`` or ``None``."""
    etype = getattr(evt, "type", None)
    if etype in (FINGERDOWN, FINGERMOTION, FINGERUP):
        pos = (evt.x * window_size[0], evt.y * window_size[1])
        pointer_id = getattr(evt, "finger_id", 0)
        kind = {FINGERDOWN: DOWN, FINGERMOTION: MOVE, FINGERUP: UP}[etype]
        return PointerEvent(kind, pos, pointer_id)
    if etype in (MOUSEBUTTONDOWN, MOUSEMOTION, MOUSEBUTTONUP):
        if getattr(evt, "touch", False):
            return None
        if etype != MOUSEMOTION and getattr(evt, "button", 1) != 1:
            return None
        kind = {MOUSEBUTTONDOWN: DOWN, MOUSEMOTION: MOVE, MOUSEBUTTONUP: UP}[etype]
        return PointerEvent(kind, tuple(evt.pos), MOUSE_ID)
    if etype == WINDOWLEAVE:
        return PointerEvent(LOST, (0.0, 0.0), MOUSE_ID)
    return None
