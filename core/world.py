"""
Chunk-partitioned tile world used by the minimap.

The world is conceptually infinite.  It is split into square chunks of
:data:`constants.CHUNK_SIZE` tiles and only chunks that have been generated
are stored.  Chunks live in a plain dictionary keyed by a single integer
packing both chunk coordinates, so an absent key simply means the chunk does
not exist yet.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple

import constants


logger = logging.getLogger(__name__)

# Chunk coordinates are packed into the low and high halves of a 64 bit key
_KEY_BITS = 32
_KEY_MASK = (1 << _KEY_BITS) - 1
_KEY_SIGN = 1 << (_KEY_BITS - 1)


class TileType(Enum):
    """Base terrain and overlay object types."""

    WATER = "water"
    SAND = "sand"
    GRASS = "grass"
    DIRT = "dirt"
    STONE = "stone"
    SNOW = "snow"
    # Overlay objects
    TREE = "tree"
    PINE_TREE = "pine_tree"
    ROCK = "rock"
    IRON_ORE = "iron_ore"
    GOLD_ORE = "gold_ore"
    FLOWER = "flower"


@dataclass(frozen=True)
class WorldPoint:
    """A position in world-tile coordinates.

    Coordinates may be fractional (a player standing between tiles); the
    tile containing the point is obtained with :attr:`tile`.
    """

    x: float
    y: float

    @property
    def tile(self) -> Tuple[int, int]:
        return math.floor(self.x), math.floor(self.y)


class ChunkCoords(NamedTuple):
    cx: int
    cy: int
    lx: int
    ly: int


def chunk_key(cx: int, cy: int) -> int:
    """Pack chunk coordinates ``(cx, cy)`` into one stable integer key."""
    return ((cx & _KEY_MASK) << _KEY_BITS) | (cy & _KEY_MASK)


def unpack_chunk_key(key: int) -> Tuple[int, int]:
    """Return the ``(cx, cy)`` pair packed into ``key``."""
    cx = (key >> _KEY_BITS) & _KEY_MASK
    cy = key & _KEY_MASK
    if cx & _KEY_SIGN:
        cx -= 1 << _KEY_BITS
    if cy & _KEY_SIGN:
        cy -= 1 << _KEY_BITS
    return cx, cy


def to_chunk_coords(
    world_x: int, world_y: int, chunk_size: int = constants.CHUNK_SIZE
) -> ChunkCoords:
    """Split a world tile position into chunk coordinates and local offset.

    Floor division keeps negative positions in the correct chunk so the local
    offset is always within ``[0, chunk_size)``.
    """
    cx, lx = divmod(world_x, chunk_size)
    cy, ly = divmod(world_y, chunk_size)
    return ChunkCoords(cx, cy, lx, ly)


def to_world_coords(
    cx: int, cy: int, lx: int, ly: int, chunk_size: int = constants.CHUNK_SIZE
) -> Tuple[int, int]:
    """Inverse of :func:`to_chunk_coords`."""
    return cx * chunk_size + lx, cy * chunk_size + ly


@dataclass
class Chunk:
    """A square block of tiles with optional overlay objects.

    ``tiles`` is indexed ``tiles[ly][lx]``.  ``objects`` maps local
    ``(lx, ly)`` pairs to the overlay standing on that tile.
    """

    cx: int
    cy: int
    tiles: List[List[Optional[TileType]]]
    objects: Dict[Tuple[int, int], TileType] = field(default_factory=dict)

    def tile_at(self, lx: int, ly: int) -> Optional[TileType]:
        """Return the base tile at ``(lx, ly)`` or ``None`` when out of range."""
        if lx < 0 or ly < 0 or ly >= len(self.tiles):
            return None
        row = self.tiles[ly]
        if lx >= len(row):
            return None
        return row[lx]

    def object_at(self, lx: int, ly: int) -> Optional[TileType]:
        return self.objects.get((lx, ly))

    @classmethod
    def filled(
        cls, cx: int, cy: int, tile: TileType, size: int = constants.CHUNK_SIZE
    ) -> "Chunk":
        """Return a chunk of ``size``×``size`` tiles all set to ``tile``."""
        return cls(cx, cy, [[tile] * size for _ in range(size)])


class World:
    """Sparse store of generated chunks.

    The store provides the lookups the minimap needs: :meth:`get` by packed
    key, :meth:`chunk_key` and :meth:`to_chunk_coords`.  Callers that share a
    ``World`` across threads must hand the renderer a consistent snapshot;
    no locking is performed here.
    """

    def __init__(self, chunk_size: int = constants.CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk size must be positive, got {chunk_size}")
        self.chunk_size = chunk_size
        self.chunks: Dict[int, Chunk] = {}

    def __len__(self) -> int:
        return len(self.chunks)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.chunks.values())

    # ------------------------------------------------------------------
    def chunk_key(self, cx: int, cy: int) -> int:
        return chunk_key(cx, cy)

    def to_chunk_coords(self, world_x: int, world_y: int) -> ChunkCoords:
        return to_chunk_coords(world_x, world_y, self.chunk_size)

    def get(self, key: int) -> Optional[Chunk]:
        """Return the chunk stored under ``key`` or ``None`` if ungenerated."""
        return self.chunks.get(key)

    def chunk_at(self, cx: int, cy: int) -> Optional[Chunk]:
        return self.chunks.get(chunk_key(cx, cy))

    # ------------------------------------------------------------------
    def add_chunk(self, chunk: Chunk) -> None:
        """Store ``chunk``, replacing any chunk at the same coordinates."""
        if len(chunk.tiles) > self.chunk_size or any(
            len(row) > self.chunk_size for row in chunk.tiles
        ):
            raise ValueError(
                f"chunk ({chunk.cx}, {chunk.cy}) exceeds chunk size {self.chunk_size}"
            )
        self.chunks[chunk_key(chunk.cx, chunk.cy)] = chunk
        logger.debug("Stored chunk (%d, %d)", chunk.cx, chunk.cy)

    def remove_chunk(self, cx: int, cy: int) -> Optional[Chunk]:
        return self.chunks.pop(chunk_key(cx, cy), None)

    def tile_at(
        self, world_x: int, world_y: int
    ) -> Tuple[Optional[TileType], Optional[TileType]]:
        """Return ``(base_tile, overlay)`` at a world position.

        Both values are ``None`` when the containing chunk is missing.
        """
        cx, cy, lx, ly = self.to_chunk_coords(world_x, world_y)
        chunk = self.chunk_at(cx, cy)
        if chunk is None:
            return None, None
        return chunk.tile_at(lx, ly), chunk.object_at(lx, ly)

    def set_object(self, world_x: int, world_y: int, obj: Optional[TileType]) -> bool:
        """Place or clear an overlay object; ``False`` if the chunk is missing."""
        cx, cy, lx, ly = self.to_chunk_coords(world_x, world_y)
        chunk = self.chunk_at(cx, cy)
        if chunk is None:
            return False
        if obj is None:
            chunk.objects.pop((lx, ly), None)
        else:
            chunk.objects[(lx, ly)] = obj
        return True
