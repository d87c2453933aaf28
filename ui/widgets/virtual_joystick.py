from __future__ import annotations

"""On-screen joystick turning touch drags into movement keys.

A press inside the joystick base starts a drag.  From then on the drag is
tracked wherever the pointer goes, even outside the base, until it is
released or lost.  Every movement is resolved by :mod:`core.joystick` into a
set of directions which is forwarded as a ``{key: pressed}`` dictionary,
e.g. ``{"w": True, "a": False, "s": False, "d": True}`` for up-right.
"""

import logging
from typing import Callable, Dict, Optional, Tuple

import pygame

import constants
import settings
from core.joystick import DragTracker, StickResolution, movement_keys
from state.event_bus import EVENT_BUS, ON_MOVEMENT_INPUT
from .pointer import DOWN, LOST, MOVE, UP, to_pointer_event

logger = logging.getLogger(__name__)

# Seconds the knob takes to glide back to rest after release
RETURN_TIME = 0.2

InputCallback = Callable[[Dict[str, bool]], None]


def _publish_input(keys: Dict[str, bool]) -> None:
    EVENT_BUS.publish(ON_MOVEMENT_INPUT, keys)


class VirtualJoystick:
    """Draggable stick centred on ``centre`` (screen pixels)."""

    def __init__(
        self,
        centre: Tuple[int, int],
        on_input: Optional[InputCallback] = None,
        size: int = constants.JOYSTICK_SIZE,
        stick_size: int = constants.JOYSTICK_STICK_SIZE,
        keymap: Optional[Dict[str, str]] = None,
    ) -> None:
        if stick_size >= size:
            raise ValueError(f"stick size {stick_size} must be smaller than base {size}")
        self.centre = centre
        self.size = size
        self.stick_size = stick_size
        self.on_input = on_input or _publish_input
        self.keymap = keymap if keymap is not None else settings.KEYMAP
        self.max_distance = size / 2 - stick_size / 2
        self.tracker = DragTracker(centre, self.max_distance, self._emit)
        self.last_keys: Dict[str, bool] = movement_keys(frozenset(), self.keymap)
        # Offset drawn on screen; eases back to rest after release
        self.display_offset: Tuple[float, float] = (0.0, 0.0)
        self._overlay = pygame.Surface((size, size), pygame.SRCALPHA)

    @property
    def rect(self) -> pygame.Rect:
        rect = pygame.Rect(0, 0, self.size, self.size)
        rect.center = self.centre
        return rect

    @property
    def active(self) -> bool:
        return self.tracker.active

    @property
    def stick_offset(self) -> Tuple[float, float]:
        return self.tracker.state.offset

    # ------------------------------------------------------------------
    def _emit(self, resolution: StickResolution) -> None:
        self.last_keys = movement_keys(resolution.directions, self.keymap)
        if self.tracker.active:
            self.display_offset = resolution.offset
        self.on_input(dict(self.last_keys))

    def contains(self, pos: Tuple[float, float]) -> bool:
        dx = pos[0] - self.centre[0]
        dy = pos[1] - self.centre[1]
        radius = self.size / 2
        return dx * dx + dy * dy <= radius * radius

    def cancel(self) -> None:
        """Abort any drag in progress, releasing all movement keys."""
        if self.tracker.active:
            self.tracker.cancel()

    # ------------------------------------------------------------------
    def handle_event(self, event: object, window_size: Tuple[int, int]) -> bool:
        """Process a pygame event returning ``True`` if it was consumed."""
        pointer = to_pointer_event(event, window_size)
        if pointer is None:
            return False
        if pointer.kind == DOWN:
            if self.active or not self.contains(pointer.pos):
                return False
            return self.tracker.begin(pointer.pointer_id)
        if pointer.kind == MOVE:
            return self.tracker.move(pointer.pos, pointer.pointer_id)
        if pointer.kind == UP:
            if not self.active or pointer.pointer_id != self.tracker.state.pointer_id:
                return False
            self.tracker.end(pointer.pointer_id)
            return True
        if pointer.kind == LOST and self.active:
            if pointer.pointer_id == self.tracker.state.pointer_id:
                logger.debug("Pointer left the window during a drag")
                self.tracker.cancel()
                return True
        return False

    def update(self, dt: float) -> None:
        """Ease the drawn knob back to rest while no drag is active."""
        if self.active:
            return
        x, y = self.display_offset
        if x == 0 and y == 0:
            return
        keep = max(0.0, 1.0 - dt / RETURN_TIME)
        if keep < 0.01:
            keep = 0.0
        self.display_offset = (x * keep, y * keep)

    # ------------------------------------------------------------------
    def draw(self, surface: pygame.Surface) -> None:
        overlay = self._overlay
        overlay.fill((0, 0, 0, 0))
        half = self.size // 2
        pygame.draw.circle(overlay, constants.JOYSTICK_BASE_COLOUR, (half, half), half)
        pygame.draw.circle(overlay, constants.JOYSTICK_RIM_COLOUR, (half, half), half, 2)
        ox, oy = self.display_offset
        pygame.draw.circle(
            overlay,
            constants.JOYSTICK_STICK_COLOUR,
            (half + ox, half + oy),
            self.stick_size // 2,
        )
        surface.blit(overlay, self.rect.topleft)
