from __future__ import annotations

"""Project the world around the player onto a square minimap.

Rendering is a pure function of the focus point, the chunk store and the
marker set: :func:`render` returns the complete list of primitives for one
frame, starting with a full clear, so it can be invoked every frame without
carrying anything over between calls.  Drawing the primitives is left to a
backend such as :mod:`render.pygame_backend`.
"""

import math
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

import constants
from core.edge_clamp import ClampResult, clamp_to_edge
from core.markers import DeathMarker, Marker, SpawnMarker, active_markers
from core.world import World, WorldPoint
from render.palette import resolve_colour
from render.primitives import Circle, Colour, FillRect, Line, Point, Polygon, Primitive

# Indicator triangles pointing along +x before rotation
SPAWN_POINTER: Tuple[Point, ...] = ((8, 0), (0, -4), (0, 4))
DEATH_POINTER: Tuple[Point, ...] = ((10, 0), (2, -4), (2, 4))

PLAYER_RADIUS = 3
DEATH_RADIUS = 5
# Tiles overlap by half a pixel so fractional tile sizes leave no seams
TILE_OVERLAP = 0.5


@dataclass(frozen=True)
class ViewportSpec:
    """Size of the minimap in pixels, tiles shown around the player and the
    border margin for clamped markers."""

    size: int = constants.MINIMAP_SIZE
    radius: int = constants.MINIMAP_RADIUS
    margin: float = constants.EDGE_MARGIN

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"viewport size must be positive, got {self.size}")
        if self.radius <= 0:
            raise ValueError(f"radius must be positive, got {self.radius}")
        if not 0 <= self.margin < self.size / 2:
            raise ValueError(f"margin {self.margin} must be in [0, {self.size / 2})")

    @property
    def tile_size(self) -> float:
        return self.size / (2 * self.radius)

    @property
    def centre(self) -> float:
        return self.size / 2


@dataclass(frozen=True)
class MinimapState:
    """Everything a frame depends on besides the world itself."""

    focus: WorldPoint
    now_ms: int
    death: Optional[DeathMarker] = None


def render_tiles(
    focus: WorldPoint, view: ViewportSpec, world: World
) -> Iterator[FillRect]:
    """Yield a filled cell for every generated tile within the viewport.

    Cells are produced row by row from the top-left corner.  Tiles in missing
    chunks, or missing from their chunk, produce nothing and show the clear
    colour underneath.
    """
    fx, fy = focus.tile
    radius = view.radius
    tile_size = view.tile_size
    cell = tile_size + TILE_OVERLAP
    for dy in range(-radius, radius):
        for dx in range(-radius, radius):
            cx, cy, lx, ly = world.to_chunk_coords(fx + dx, fy + dy)
            chunk = world.get(world.chunk_key(cx, cy))
            if chunk is None:
                continue
            tile = chunk.tile_at(lx, ly)
            if tile is None:
                continue
            colour = resolve_colour(tile, chunk.object_at(lx, ly))
            yield FillRect(
                (dx + radius) * tile_size,
                (dy + radius) * tile_size,
                cell,
                cell,
                colour,
            )


def project_marker(marker: Marker, focus: WorldPoint, view: ViewportSpec) -> ClampResult:
    """Return the clamped minimap position of ``marker``."""
    fx, fy = focus.tile
    raw_x = (math.floor(marker.x) - fx + view.radius) * view.tile_size
    raw_y = (math.floor(marker.y) - fy + view.radius) * view.tile_size
    return clamp_to_edge(raw_x, raw_y, view.size, view.margin)


def _pointer(
    shape: Sequence[Point], at: ClampResult, colour: Colour
) -> Polygon:
    """Rotate ``shape`` by the clamp bearing and move it to the clamped spot."""
    cos_b = math.cos(at.bearing)
    sin_b = math.sin(at.bearing)
    points = tuple(
        (at.x + px * cos_b - py * sin_b, at.y + px * sin_b + py * cos_b)
        for px, py in shape
    )
    return Polygon(points, colour)


def spawn_primitives(at: ClampResult) -> List[Primitive]:
    x, y = at.x, at.y
    house = ((x, y - 4), (x + 4, y), (x + 4, y + 4), (x - 4, y + 4), (x - 4, y))
    prims: List[Primitive] = [
        Polygon(house, constants.SPAWN_COLOUR, constants.SPAWN_OUTLINE)
    ]
    if at.clamped:
        prims.append(_pointer(SPAWN_POINTER, at, constants.SPAWN_COLOUR))
    return prims


def death_primitives(at: ClampResult) -> List[Primitive]:
    x, y = at.x, at.y
    white = constants.WHITE
    prims: List[Primitive] = [
        Circle((x, y), DEATH_RADIUS, constants.DEATH_COLOUR, constants.DEATH_OUTLINE),
        # Crossed-out eyes
        Line((x - 3, y - 2), (x - 1, y), white),
        Line((x - 1, y - 2), (x - 3, y), white),
        Line((x + 1, y - 2), (x + 3, y), white),
        Line((x + 3, y - 2), (x + 1, y), white),
    ]
    if at.clamped:
        prims.append(_pointer(DEATH_POINTER, at, constants.DEATH_COLOUR))
    return prims


def render_markers(state: MinimapState, view: ViewportSpec) -> List[Primitive]:
    prims: List[Primitive] = []
    for marker in active_markers(state.death, state.now_ms):
        at = project_marker(marker, state.focus, view)
        if isinstance(marker, SpawnMarker):
            prims.extend(spawn_primitives(at))
        else:
            prims.extend(death_primitives(at))
    return prims


def render(state: MinimapState, world: World, view: ViewportSpec) -> List[Primitive]:
    """Return every primitive of one minimap frame in drawing order."""
    prims: List[Primitive] = [
        FillRect(0, 0, view.size, view.size, constants.MINIMAP_BACKGROUND)
    ]
    prims.extend(render_tiles(state.focus, view, world))
    prims.extend(render_markers(state, view))
    prims.append(
        Circle(
            (view.centre, view.centre),
            PLAYER_RADIUS,
            constants.PLAYER_COLOUR,
            constants.PLAYER_OUTLINE,
        )
    )
    return prims


def legend_entries(state: MinimapState) -> List[Tuple[str, Colour]]:
    """Return ``(label, colour)`` pairs for the markers currently shown."""
    entries = []
    for marker in active_markers(state.death, state.now_ms):
        colour = (
            constants.SPAWN_COLOUR
            if isinstance(marker, SpawnMarker)
            else constants.DEATH_COLOUR
        )
        entries.append((marker.label, colour))
    return entries
