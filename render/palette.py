"""Minimap colours for terrain tiles and overlay objects."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import constants
from core.world import TileType

TILE_COLOURS: Dict[TileType, Tuple[int, int, int]] = {
    TileType.WATER: (37, 99, 235),
    TileType.SAND: (234, 203, 140),
    TileType.GRASS: (74, 160, 74),
    TileType.DIRT: (120, 85, 55),
    TileType.STONE: (120, 113, 108),
    TileType.SNOW: (240, 244, 248),
    TileType.FLOWER: (74, 160, 74),
}

TREE_OVERLAYS = frozenset({TileType.TREE, TileType.PINE_TREE})
ROCK_OVERLAYS = frozenset({TileType.ROCK, TileType.IRON_ORE, TileType.GOLD_ORE})


def colour_of(tile: Optional[TileType]) -> Tuple[int, int, int]:
    """Return the palette colour of ``tile``, the clear colour if unknown."""
    return TILE_COLOURS.get(tile, constants.MINIMAP_BACKGROUND)


def resolve_colour(
    tile: Optional[TileType], overlay: Optional[TileType] = None
) -> Tuple[int, int, int]:
    """Return the display colour of a tile with an optional overlay on top."""
    if overlay in TREE_OVERLAYS:
        return constants.TREE_COLOUR
    if overlay in ROCK_OVERLAYS:
        return constants.STONE_COLOUR
    return colour_of(tile)
