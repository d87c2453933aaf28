"""On-screen controls for touch devices.

The joystick sits in the bottom-left corner.  A sprint button (held) and an
inventory toggle are stacked in the bottom-right corner.  While the
inventory is open the controls are hidden and any drag in progress is
cancelled so the player stops.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Tuple

import pygame

import constants
import settings
from state.event_bus import EVENT_BUS, ON_SPRINT_CHANGED, ON_TOGGLE_INVENTORY
from ui.widgets.touch_button import TouchButton
from ui.widgets.virtual_joystick import InputCallback, VirtualJoystick

logger = logging.getLogger(__name__)

# Distance of the controls from the screen edges
EDGE_PADDING = 32
JOYSTICK_BOTTOM = 96
BUTTON_GAP = 16


class MobileControls:
    """Joystick plus sprint and inventory buttons laid out for ``screen_size``."""

    def __init__(
        self,
        screen_size: Tuple[int, int],
        on_input: Optional[InputCallback] = None,
        on_toggle_inventory: Optional[Callable[[], None]] = None,
    ) -> None:
        self.screen_size = screen_size
        self.on_input = on_input
        self.on_toggle_inventory = on_toggle_inventory
        self.inventory_open = False
        width, height = screen_size

        half = constants.JOYSTICK_SIZE // 2
        joy_centre = (EDGE_PADDING + half, height - JOYSTICK_BOTTOM - half)
        self.joystick = VirtualJoystick(joy_centre, on_input=on_input)

        sprint_size = constants.SPRINT_BUTTON_SIZE
        inv_size = constants.INVENTORY_BUTTON_SIZE
        right = width - EDGE_PADDING
        inv_rect = pygame.Rect(0, 0, inv_size, inv_size)
        inv_rect.bottomright = (right - (sprint_size - inv_size) // 2, height - EDGE_PADDING)
        sprint_rect = pygame.Rect(0, 0, sprint_size, sprint_size)
        sprint_rect.bottomright = (right, inv_rect.top - BUTTON_GAP)

        self.sprint_button = TouchButton(
            sprint_rect,
            ">>",
            constants.SPRINT_COLOUR,
            constants.SPRINT_RIM,
            on_press=lambda: self._set_sprint(True),
            on_release=lambda: self._set_sprint(False),
        )
        self.inventory_button = TouchButton(
            inv_rect,
            "I",
            constants.INVENTORY_COLOUR,
            constants.INVENTORY_RIM,
            on_tap=self._toggle_inventory,
        )

    # ------------------------------------------------------------------
    def _send(self, keys: Dict[str, bool]) -> None:
        if self.on_input is not None:
            self.on_input(keys)

    def _set_sprint(self, held: bool) -> None:
        self._send({settings.KEYMAP["sprint"]: held})
        EVENT_BUS.publish(ON_SPRINT_CHANGED, held)

    def _toggle_inventory(self) -> None:
        if self.on_toggle_inventory is not None:
            self.on_toggle_inventory()
        EVENT_BUS.publish(ON_TOGGLE_INVENTORY)

    def set_inventory_open(self, is_open: bool) -> None:
        """Hide or show the controls; opening stops any movement in progress."""
        if is_open == self.inventory_open:
            return
        self.inventory_open = is_open
        if is_open:
            self.joystick.cancel()
            if self.sprint_button.pressed:
                self.sprint_button.release()
        logger.debug("Mobile controls %s", "hidden" if is_open else "shown")

    # ------------------------------------------------------------------
    def handle_event(self, event: object) -> bool:
        """Dispatch ``event`` to the controls; ``False`` while hidden."""
        if self.inventory_open:
            return False
        if self.joystick.handle_event(event, self.screen_size):
            return True
        if self.sprint_button.handle(event, self.screen_size):
            return True
        return self.inventory_button.handle(event, self.screen_size)

    def update(self, dt: float) -> None:
        self.joystick.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        if self.inventory_open:
            return
        self.joystick.draw(surface)
        self.sprint_button.draw(surface)
        self.inventory_button.draw(surface)
