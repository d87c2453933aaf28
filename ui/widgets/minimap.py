from __future__ import annotations

"""Player-centred minimap widget.

The widget shows the tiles within :data:`constants.MINIMAP_RADIUS` of the
player on a small square surface.  The spawn point and, for five minutes
after a death, the death location are drawn on top; markers outside the
visible area stick to the border with a small arrow pointing at them.  A
legend listing the visible marker kinds is drawn below the map.

The surface is cleared and fully redrawn on every :meth:`Minimap.draw`, so
the widget can simply be drawn once per frame.
"""

import logging
from typing import Callable, List, Optional, Tuple

import pygame

import settings
import theme
from core.markers import DeathMarker, epoch_ms
from core.world import World, WorldPoint
from render.minimap_renderer import MinimapState, ViewportSpec, legend_entries, render
from render.pygame_backend import draw_primitives
from render.primitives import Colour
from state.event_bus import EVENT_BUS, ON_PLAYER_DIED

logger = logging.getLogger(__name__)

# Vertical gap between the map and its legend
LEGEND_GAP = 6
LEGEND_SPACING = 12


class Minimap:
    """Render the world around the player into a fixed-size surface."""

    def __init__(
        self,
        world: World,
        view: Optional[ViewportSpec] = None,
        clock: Callable[[], int] = epoch_ms,
        show_legend: bool = settings.SHOW_LEGEND,
    ) -> None:
        self.world = world
        self.view = view or ViewportSpec()
        self.clock = clock
        self.show_legend = show_legend
        self.focus = WorldPoint(0, 0)
        self.death: Optional[DeathMarker] = None
        size = self.view.size
        self.surface = pygame.Surface((size, size), pygame.SRCALPHA)
        self._font = theme.get_font(theme.LEGEND_FONT_SIZE)
        EVENT_BUS.subscribe(ON_PLAYER_DIED, self.on_player_died)

    # ------------------------------------------------------------------
    def update(self, focus: WorldPoint) -> None:
        """Centre the map on ``focus``."""
        self.focus = focus

    def set_death_marker(self, marker: Optional[DeathMarker]) -> None:
        self.death = marker

    def on_player_died(self, x: float, y: float, at_ms: Optional[int] = None) -> None:
        """Remember where the player died; the marker expires on its own."""
        created = self.clock() if at_ms is None else at_ms
        self.death = DeathMarker(x, y, created)
        logger.info("Death marker placed at (%.1f, %.1f)", x, y)

    def state(self) -> MinimapState:
        return MinimapState(self.focus, self.clock(), self.death)

    def legend_entries(self) -> List[Tuple[str, Colour]]:
        return legend_entries(self.state())

    # ------------------------------------------------------------------
    def redraw(self) -> int:
        """Repaint :attr:`surface` and return the number of primitives drawn."""
        return draw_primitives(self.surface, render(self.state(), self.world, self.view))

    def draw(self, dest: pygame.Surface, rect: Optional[pygame.Rect] = None) -> pygame.Rect:
        """Draw the minimap onto ``dest`` within ``rect`` and return ``rect``."""
        if rect is None:
            rect = pygame.Rect(0, 0, self.view.size, self.view.size)
        self.redraw()
        surf = self.surface
        if rect.size != surf.get_size():
            surf = pygame.transform.smoothscale(surf, rect.size)
        dest.blit(surf, rect.topleft)
        theme.draw_frame(dest, rect)
        if self.show_legend:
            self._draw_legend(dest, rect)
        return rect

    def _draw_legend(self, dest: pygame.Surface, rect: pygame.Rect) -> None:
        if self._font is None:
            return
        items = []
        for label, colour in self.legend_entries():
            text = self._font.render(label, True, theme.PALETTE["text"])
            items.append((text, colour))
        dot = theme.LEGEND_DOT_RADIUS
        widths = [dot * 2 + 4 + text.get_width() for text, _ in items]
        total = sum(widths) + LEGEND_SPACING * (len(items) - 1)
        x = rect.centerx - total // 2
        y = rect.bottom + LEGEND_GAP
        for (text, colour), width in zip(items, widths):
            centre_y = y + text.get_height() // 2
            pygame.draw.circle(dest, colour, (x + dot, centre_y), dot)
            dest.blit(text, (x + dot * 2 + 4, y))
            x += width + LEGEND_SPACING
