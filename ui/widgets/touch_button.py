from __future__ import annotations

"""Round on-screen button for touch controls."""

from typing import Callable, Optional, Tuple

import pygame

import theme
from .pointer import DOWN, LOST, UP, to_pointer_event


class TouchButton:
    """Circular button reacting to touches and mouse clicks.

    ``on_press`` fires when a pointer goes down on the button and
    ``on_release`` when that pointer lifts, wherever it is, so the button can
    be held.  ``on_tap`` fires on release only if the pointer is still over
    the button.
    """

    def __init__(
        self,
        rect: pygame.Rect,
        label: str,
        colour: Tuple[int, int, int],
        rim: Tuple[int, int, int],
        on_press: Optional[Callable[[], None]] = None,
        on_release: Optional[Callable[[], None]] = None,
        on_tap: Optional[Callable[[], None]] = None,
    ) -> None:
        self.rect = rect
        self.label = label
        self.colour = colour
        self.rim = rim
        self.on_press = on_press
        self.on_release = on_release
        self.on_tap = on_tap
        self.pressed_by: Optional[int] = None
        self.font = theme.get_font(rect.height // 2)

    @property
    def pressed(self) -> bool:
        return self.pressed_by is not None

    # ------------------------------------------------------------------
    def collidepoint(self, pos: Tuple[float, float]) -> bool:
        dx = pos[0] - self.rect.centerx
        dy = pos[1] - self.rect.centery
        radius = self.rect.width / 2
        return dx * dx + dy * dy <= radius * radius

    def _press(self, pointer_id: int) -> None:
        self.pressed_by = pointer_id
        if self.on_press:
            self.on_press()

    def release(self, tapped: bool = False) -> None:
        """Let go of the button, firing ``on_release`` and possibly ``on_tap``."""
        self.pressed_by = None
        if self.on_release:
            self.on_release()
        if tapped and self.on_tap:
            self.on_tap()

    # ------------------------------------------------------------------
    def draw(self, surface: pygame.Surface) -> None:
        """Render the button to ``surface``."""
        radius = self.rect.width // 2
        # Shrink slightly while held
        if self.pressed:
            radius = int(radius * 0.95)
        pygame.draw.circle(surface, self.colour, self.rect.center, radius)
        pygame.draw.circle(surface, self.rim, self.rect.center, radius, theme.FRAME_WIDTH)
        if self.font:
            text = self.font.render(self.label, True, theme.PALETTE["button_text"])
            surface.blit(text, text.get_rect(center=self.rect.center))

    # ------------------------------------------------------------------
    def handle(self, event: object, window_size: Tuple[int, int]) -> bool:
        """Process a pygame event returning ``True`` if it was handled."""
        pointer = to_pointer_event(event, window_size)
        if pointer is None:
            return False
        if pointer.kind == DOWN and not self.pressed and self.collidepoint(pointer.pos):
            self._press(pointer.pointer_id)
            return True
        if pointer.kind == UP and self.pressed_by == pointer.pointer_id:
            self.release(self.collidepoint(pointer.pos))
            return True
        if pointer.kind == LOST and self.pressed_by == pointer.pointer_id:
            self.release(False)
            return True
        return False
