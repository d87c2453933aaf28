"""
Translate drag gestures into movement directions.

A drag is described by its displacement from the joystick's rest position
in screen space (``+y`` points down).  :func:`resolve_drag` turns one
displacement into a clamped stick offset and a set of active directions.
Each direction owns a 135 degree band centred on its axis; neighbouring
bands overlap by 45 degrees so diagonal drags activate two directions.

:class:`DragTracker` follows one gesture from start to end and forwards
every resolution to a movement callback.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, FrozenSet, Optional, Tuple

import constants
import settings


logger = logging.getLogger(__name__)


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


NO_DIRECTIONS: FrozenSet[Direction] = frozenset()

_LOW = 90.0 - constants.DIRECTION_BAND_HALF_WIDTH  # 22.5
_HIGH = 90.0 + constants.DIRECTION_BAND_HALF_WIDTH  # 157.5


def directions_for_angle(degrees: float) -> FrozenSet[Direction]:
    """Return the directions active for a drag at ``degrees``.

    ``degrees`` is measured like :func:`math.atan2` in screen space, in the
    range ``[-180, 180]``: 0 is right, 90 is down, -90 is up.
    """
    half = constants.DIRECTION_BAND_HALF_WIDTH
    active = set()
    if -_HIGH < degrees < -_LOW:
        active.add(Direction.UP)
    if _LOW < degrees < _HIGH:
        active.add(Direction.DOWN)
    if degrees > 180.0 - half or degrees < -(180.0 - half):
        active.add(Direction.LEFT)
    if -half < degrees < half:
        active.add(Direction.RIGHT)
    return frozenset(active)


@dataclass(frozen=True)
class StickResolution:
    offset: Tuple[float, float] = (0.0, 0.0)
    directions: FrozenSet[Direction] = NO_DIRECTIONS


NEUTRAL = StickResolution()


def resolve_drag(dx: float, dy: float, max_magnitude: float) -> StickResolution:
    """Resolve a drag displacement ``(dx, dy)``.

    The stick offset keeps the drag's angle while its length is limited to
    ``max_magnitude``.  A zero-length drag is neutral.
    """
    distance = math.hypot(dx, dy)
    if distance == 0:
        return NEUTRAL
    angle = math.atan2(dy, dx)
    clamped = min(distance, max_magnitude)
    offset = (math.cos(angle) * clamped, math.sin(angle) * clamped)
    return StickResolution(offset, directions_for_angle(math.degrees(angle)))


def movement_keys(
    directions: FrozenSet[Direction], keymap: Optional[Dict[str, str]] = None
) -> Dict[str, bool]:
    """Map ``directions`` onto a pressed/released dictionary of movement keys."""
    keymap = settings.KEYMAP if keymap is None else keymap
    return {keymap[d.value]: d in directions for d in Direction}


class DragPhase(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass
class StickState:
    """Transient state of the one active drag gesture."""

    phase: DragPhase = DragPhase.IDLE
    offset: Tuple[float, float] = (0.0, 0.0)
    directions: FrozenSet[Direction] = field(default_factory=frozenset)
    pointer_id: Optional[int] = None


class DragTracker:
    """State machine following a single drag gesture.

    ``centre`` is the rest position of the stick in screen coordinates and
    ``emit`` receives a :class:`StickResolution` after every movement.  The
    transition back to idle always emits :data:`NEUTRAL`, whichever event
    triggered it, so the consumer can treat an empty direction set as stop.
    """

    def __init__(
        self,
        centre: Tuple[float, float],
        max_magnitude: float,
        emit: Callable[[StickResolution], None],
    ) -> None:
        if max_magnitude <= 0:
            raise ValueError(f"max magnitude must be positive, got {max_magnitude}")
        self.centre = centre
        self.max_magnitude = max_magnitude
        self.emit = emit
        self.state = StickState()

    @property
    def active(self) -> bool:
        return self.state.phase is DragPhase.DRAGGING

    def begin(self, pointer_id: Optional[int] = None) -> bool:
        """Start tracking ``pointer_id``; ``False`` if a drag is in progress."""
        if self.active:
            return False
        self.state.phase = DragPhase.DRAGGING
        self.state.pointer_id = pointer_id
        logger.debug("Drag started by pointer %s", pointer_id)
        return True

    def move(self, pos: Tuple[float, float], pointer_id: Optional[int] = None) -> bool:
        """Resolve the pointer at absolute ``pos``.

        Movements are ignored while idle or when they come from a pointer other
        than the one that started the drag.
        """
        if not self.active or pointer_id != self.state.pointer_id:
            return False
        resolution = resolve_drag(
            pos[0] - self.centre[0], pos[1] - self.centre[1], self.max_magnitude
        )
        self.state.offset = resolution.offset
        self.state.directions = resolution.directions
        self.emit(resolution)
        return True

    def end(self, pointer_id: Optional[int] = None) -> None:
        """Finish the drag started by ``pointer_id``."""
        if self.active and pointer_id != self.state.pointer_id:
            return
        self.cancel()

    def cancel(self) -> None:
        """Return to idle unconditionally and emit the neutral resolution."""
        if self.active:
            logger.debug("Drag ended for pointer %s", self.state.pointer_id)
        self.state = StickState()
        self.emit(NEUTRAL)
