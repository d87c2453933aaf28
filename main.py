"""Entry point for the minimap HUD demo.

Initialises Pygame, builds a small hand-made chunk store around the spawn
point and lets the player walk around with the keyboard or the on-screen
joystick while the minimap follows.  Press ``K`` to die on the spot and
leave a death marker, ``I`` to toggle the (empty) inventory.
"""

import logging
from typing import Dict, Optional, Set

import pygame

import constants
import settings
from core.world import Chunk, TileType, World, WorldPoint
from state.event_bus import EVENT_BUS, ON_PLAYER_DIED
from ui.mobile_controls import MobileControls
from ui.widgets.minimap import Minimap

logger = logging.getLogger(__name__)

_DEMO_BANDS = (TileType.WATER, TileType.SAND, TileType.GRASS, TileType.GRASS, TileType.DIRT)


def demo_world(radius: int = 3) -> World:
    """Return a world with ``(2 * radius + 1) ** 2`` chunks of striped terrain.

    Chunks beyond ``radius`` stay missing so the minimap shows where the
    generated area ends.
    """
    world = World()
    size = world.chunk_size
    for cy in range(-radius, radius + 1):
        for cx in range(-radius, radius + 1):
            base = _DEMO_BANDS[(abs(cx) + abs(cy)) % len(_DEMO_BANDS)]
            chunk = Chunk.filled(cx, cy, base, size)
            if base is TileType.GRASS:
                for i in range(0, size, 3):
                    chunk.objects[(i, (i * 7) % size)] = TileType.TREE
            elif base is TileType.DIRT:
                chunk.objects[(size // 2, size // 2)] = TileType.IRON_ORE
            world.add_chunk(chunk)
    return world


class Demo:
    """Keyboard and touch driven player walking over :func:`demo_world`."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.world = demo_world()
        self.player = WorldPoint(0.5, 0.5)
        self.minimap = Minimap(self.world)
        self.touch_keys: Dict[str, bool] = {}
        self.inventory_open = False
        self.controls: Optional[MobileControls] = None
        if settings.TOUCH_CONTROLS:
            self.controls = MobileControls(
                screen.get_size(), self._on_touch_input, self._toggle_inventory
            )
        self._key_codes = {
            action: pygame.key.key_code(name)
            for action, name in settings.KEYMAP.items()
            if action != "sprint"
        }

    def _on_touch_input(self, keys: Dict[str, bool]) -> None:
        self.touch_keys.update(keys)

    def _toggle_inventory(self) -> None:
        self.inventory_open = not self.inventory_open
        if self.controls is not None:
            self.controls.set_inventory_open(self.inventory_open)

    def _pressed_actions(self) -> Set[str]:
        pressed = pygame.key.get_pressed()
        actions = {a for a, code in self._key_codes.items() if pressed[code]}
        for action, key in settings.KEYMAP.items():
            if self.touch_keys.get(key):
                actions.add(action)
        if pygame.key.get_mods() & pygame.KMOD_SHIFT:
            actions.add("sprint")
        return actions

    def step(self, dt: float) -> None:
        if self.inventory_open:
            return
        actions = self._pressed_actions()
        dx = ("right" in actions) - ("left" in actions)
        dy = ("down" in actions) - ("up" in actions)
        speed = constants.PLAYER_SPEED
        if "sprint" in actions:
            speed *= constants.SPRINT_MULTIPLIER
        self.player = WorldPoint(self.player.x + dx * speed * dt, self.player.y + dy * speed * dt)
        self.minimap.update(self.player)
        if self.controls is not None:
            self.controls.update(dt)

    def handle_event(self, event: pygame.event.Event) -> None:
        if self.controls is not None and self.controls.handle_event(event):
            return
        if event.type == pygame.KEYDOWN and event.key == pygame.K_k:
            EVENT_BUS.publish(ON_PLAYER_DIED, self.player.x, self.player.y)
            self.player = WorldPoint(0.5, 0.5)
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_i:
            self._toggle_inventory()

    def draw(self) -> None:
        self.screen.fill(constants.DARK_GREY)
        size = self.minimap.view.size
        rect = pygame.Rect(16, 16, size, size)
        self.minimap.draw(self.screen, rect)
        if self.controls is not None:
            self.controls.draw(self.screen)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((constants.WINDOW_WIDTH, constants.WINDOW_HEIGHT))
    pygame.display.set_caption("Minimap HUD")
    demo = Demo(screen)
    logger.info("Demo world ready with %d chunks", len(demo.world))

    clock = pygame.time.Clock()
    running = True
    while running:
        dt = clock.tick(constants.FPS) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            else:
                demo.handle_event(event)
        demo.step(dt)
        demo.draw()
        pygame.display.flip()
    pygame.quit()


if __name__ == "__main__":
    main()
