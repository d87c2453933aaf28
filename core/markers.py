from __future__ import annotations

"""Points of interest shown on the minimap.

Two kinds exist: the spawn point, permanently fixed at the world origin, and
the spot where the player last died.  A death marker is only shown for
:data:`constants.DEATH_MARKER_DURATION_MS` after the death.
"""

import time
from dataclasses import dataclass
from typing import List, Optional, Union

import constants


def epoch_ms() -> int:
    """Return the current wall clock time in milliseconds."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class SpawnMarker:
    x: int = 0
    y: int = 0
    label: str = "Spawn"


@dataclass(frozen=True)
class DeathMarker:
    """Location of the player's last death and when it happened."""

    x: float
    y: float
    created_at_ms: int
    label: str = "Death"

    def is_active(
        self, now_ms: int, duration_ms: int = constants.DEATH_MARKER_DURATION_MS
    ) -> bool:
        return now_ms - self.created_at_ms < duration_ms

    def expires_at(self, duration_ms: int = constants.DEATH_MARKER_DURATION_MS) -> int:
        return self.created_at_ms + duration_ms


Marker = Union[SpawnMarker, DeathMarker]

SPAWN = SpawnMarker()


def active_markers(death: Optional[DeathMarker], now_ms: int) -> List[Marker]:
    """Return the markers to display at ``now_ms``, spawn first."""
    markers: List[Marker] = [SPAWN]
    if death is not None and death.is_active(now_ms):
        markers.append(death)
    return markers
