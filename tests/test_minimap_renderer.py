import inspect
import math

import pytest

import constants
from core.markers import SPAWN, DeathMarker
from core.world import Chunk, TileType, World, WorldPoint
from render.minimap_renderer import (
    MinimapState,
    ViewportSpec,
    legend_entries,
    project_marker,
    render,
    render_tiles,
)
from render.palette import TILE_COLOURS, colour_of, resolve_colour
from render.primitives import Circle, FillRect, Line, Polygon

FIVE_MINUTES = 5 * 60 * 1000


def _single_tile_world(wx, wy, tile=TileType.SAND, overlay=None):
    world = World(chunk_size=16)
    chunk = Chunk(wx // 16, wy // 16, [[None] * 16 for _ in range(16)])
    chunk.tiles[wy % 16][wx % 16] = tile
    if overlay is not None:
        chunk.objects[(wx % 16, wy % 16)] = overlay
    world.add_chunk(chunk)
    return world


def test_viewport_defaults():
    view = ViewportSpec()
    assert (view.size, view.radius, view.margin) == (150, 40, 8)
    assert view.tile_size == pytest.approx(150 / 80)


@pytest.mark.parametrize(
    "kwargs", [dict(size=0), dict(radius=0), dict(margin=75), dict(margin=-1)]
)
def test_viewport_invariants(kwargs):
    with pytest.raises(ValueError):
        ViewportSpec(**kwargs)


def test_render_tiles_is_lazy(world):
    cells = render_tiles(WorldPoint(0, 0), ViewportSpec(), world)
    assert inspect.isgenerator(cells)
    first = next(cells)
    assert isinstance(first, FillRect)


def test_focus_is_floored_before_projection():
    # Only world tile (10, 10) exists; with focus (10.4, 10.6) it must sit at
    # offset (0, 0), the cell right of and below the centre
    world = _single_tile_world(10, 10)
    view = ViewportSpec(size=40, radius=2)
    cells = list(render_tiles(WorldPoint(10.4, 10.6), view, world))
    assert len(cells) == 1
    cell = cells[0]
    assert (cell.x, cell.y) == (20, 20)
    assert cell.width == cell.height == 10.5


def test_cells_scan_row_major_with_half_pixel_overlap(world):
    view = ViewportSpec(size=40, radius=2)
    cells = list(render_tiles(WorldPoint(0, 0), view, world))
    assert len(cells) == 16
    positions = [(c.x, c.y) for c in cells]
    assert positions == [(x * 10.0, y * 10.0) for y in range(4) for x in range(4)]
    assert all(c.width == 10.5 for c in cells)


def test_missing_chunks_and_tiles_render_nothing():
    world = _single_tile_world(0, 0)
    view = ViewportSpec(size=80, radius=4)
    cells = list(render_tiles(WorldPoint(0, 0), view, world))
    assert len(cells) == 1
    # Focus far away from any chunk
    assert list(render_tiles(WorldPoint(1000, 1000), view, world)) == []


def test_short_chunk_rows_are_treated_as_missing():
    world = World(chunk_size=16)
    world.add_chunk(Chunk(0, 0, [[TileType.GRASS] * 2, [TileType.GRASS]]))
    cells = list(render_tiles(WorldPoint(0, 0), ViewportSpec(size=80, radius=4), world))
    assert len(cells) == 3


def test_overlay_colours(world):
    view = ViewportSpec(size=40, radius=2)
    cells = list(render_tiles(WorldPoint(0, 0), view, world))
    by_pos = {(c.x, c.y): c.colour for c in cells}
    # The tree at world (1, 0) is visible with radius 2; the ore at (2, 0)
    # falls just outside
    assert by_pos[(30.0, 20.0)] == constants.TREE_COLOUR
    assert by_pos[(20.0, 20.0)] == TILE_COLOURS[TileType.GRASS]


def test_palette_resolution():
    grass = TILE_COLOURS[TileType.GRASS]
    assert resolve_colour(TileType.GRASS) == grass
    assert resolve_colour(TileType.GRASS, TileType.PINE_TREE) == constants.TREE_COLOUR
    for ore in (TileType.ROCK, TileType.IRON_ORE, TileType.GOLD_ORE):
        assert resolve_colour(TileType.SAND, ore) == constants.STONE_COLOUR
    assert resolve_colour(TileType.GRASS, TileType.FLOWER) == grass
    assert colour_of(None) == constants.MINIMAP_BACKGROUND
    assert colour_of(TileType.TREE) == constants.MINIMAP_BACKGROUND


def test_spawn_far_away_is_clamped_towards_upper_left():
    view = ViewportSpec(size=150)
    res = project_marker(SPAWN, WorldPoint(1000, 1000), view)
    assert res.clamped
    assert -math.pi < res.bearing < -math.pi / 2
    assert res.bearing == pytest.approx(-3 * math.pi / 4)
    assert (res.x, res.y) == pytest.approx((8, 8))


def test_spawn_nearby_is_not_clamped():
    view = ViewportSpec()
    res = project_marker(SPAWN, WorldPoint(2.7, -3.2), view)
    assert not res.clamped
    t = view.tile_size
    assert (res.x, res.y) == pytest.approx(((0 - 2 + 40) * t, (0 + 4 + 40) * t))


def test_frame_order_and_contents(world):
    view = ViewportSpec()
    prims = render(MinimapState(WorldPoint(0.5, 0.5), now_ms=0), world, view)
    clear = prims[0]
    assert clear == FillRect(0, 0, 150, 150, constants.MINIMAP_BACKGROUND)
    player = prims[-1]
    assert isinstance(player, Circle)
    assert player.centre == (75, 75)
    assert player.colour == constants.PLAYER_COLOUR
    spawn = [p for p in prims if isinstance(p, Polygon)]
    # House only; the spawn is on screen so there is no pointer
    assert len(spawn) == 1
    assert spawn[0].colour == constants.SPAWN_COLOUR


def test_clamped_marker_gets_pointer():
    view = ViewportSpec()
    prims = render(MinimapState(WorldPoint(1000, 1000), now_ms=0), World(), view)
    polygons = [p for p in prims if isinstance(p, Polygon)]
    assert len(polygons) == 2
    pointer = polygons[1]
    tip = pointer.points[0]
    # Tip sits 8px from the clamped spot along the upper-left diagonal
    assert tip == pytest.approx((8 - 8 / math.sqrt(2), 8 - 8 / math.sqrt(2)))


def test_death_marker_drawn_while_active():
    view = ViewportSpec()
    death = DeathMarker(3, 0, created_at_ms=0)
    state = MinimapState(WorldPoint(0, 0), death=death, now_ms=1000)
    prims = render(state, World(), view)
    circles = [p for p in prims if isinstance(p, Circle)]
    assert circles[0].colour == constants.DEATH_COLOUR
    lines = [p for p in prims if isinstance(p, Line)]
    assert len(lines) == 4
    assert [label for label, _ in legend_entries(state)] == ["Spawn", "Death"]


def test_expired_death_marker_is_neither_drawn_nor_listed():
    view = ViewportSpec()
    death = DeathMarker(3, 0, created_at_ms=50_000)
    state = MinimapState(WorldPoint(0, 0), death=death, now_ms=50_000 + FIVE_MINUTES + 1)
    prims = render(state, World(), view)
    assert not any(isinstance(p, Line) for p in prims)
    assert [p.colour for p in prims if isinstance(p, Circle)] == [constants.PLAYER_COLOUR]
    assert [label for label, _ in legend_entries(state)] == ["Spawn"]


def test_render_is_idempotent(world):
    view = ViewportSpec()
    state = MinimapState(WorldPoint(-3.3, 7.9), now_ms=10, death=DeathMarker(-100, 5, 0))
    assert render(state, world, view) == render(state, world, view)


def test_state_requires_current_time():
    with pytest.raises(TypeError):
        MinimapState(WorldPoint(0, 0))
