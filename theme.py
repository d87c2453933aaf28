"""HUD theme definitions.

Centralises the colours, frame style and font helper used by the on-screen
widgets.  Fonts are looked up lazily so tests can run even when pygame's
font subsystem is unavailable.
"""

from __future__ import annotations

try:  # pragma: no cover - optional when pygame missing
    import pygame
except Exception:  # pragma: no cover
    pygame = None

# ---------------------------------------------------------------------------
# Colour palette
# ---------------------------------------------------------------------------
# Stone greys with muted white text, matching the minimap frame
PALETTE = {
    "frame": (87, 83, 78),         # stone-600 minimap border
    "text": (200, 200, 200),       # legend labels
    "button_text": (255, 255, 255),
}

# Default frame thickness and corner rounding used by widgets
FRAME_WIDTH = 2
FRAME_RADIUS = 8

LEGEND_FONT_SIZE = 14
LEGEND_DOT_RADIUS = 4


def get_font(size: int = 16):
    """Return the default UI font or ``None`` when unavailable."""
    if pygame is None:
        return None
    try:  # pragma: no cover - depends on system fonts
        if not pygame.font.get_init():
            pygame.font.init()
        return pygame.font.Font(None, size)
    except Exception:  # pragma: no cover - font module missing
        return None


def draw_frame(surface: "pygame.Surface", rect: "pygame.Rect") -> None:
    """Draw a rounded border around ``rect`` on ``surface``."""
    if pygame is None:
        return
    pygame.draw.rect(surface, PALETTE["frame"], rect, FRAME_WIDTH, border_radius=FRAME_RADIUS)
