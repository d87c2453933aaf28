from __future__ import annotations

"""Project off-screen points onto the border of a square viewport.

Markers outside the visible area are drawn on the border instead, at the
point where the ray from the viewport centre towards the marker leaves the
inner box ``[margin, size - margin]``.  The returned bearing always points
at the true position so an indicator can be oriented towards it.
"""

import math
from typing import NamedTuple, Optional

import constants


class ClampResult(NamedTuple):
    x: float
    y: float
    clamped: bool
    bearing: Optional[float] = None


def clamp_to_edge(
    x: float, y: float, size: float, margin: float = constants.EDGE_MARGIN
) -> ClampResult:
    """Clamp the viewport pixel position ``(x, y)`` onto the border box.

    Points already inside the box are returned unchanged with ``clamped``
    false.  Otherwise the result lies on the box boundary, ``clamped`` is true
    and ``bearing`` is ``atan2`` of the vector from the centre to the raw
    point, in radians.
    """
    if size <= 0:
        raise ValueError(f"viewport size must be positive, got {size}")
    if margin < 0 or margin >= size / 2:
        raise ValueError(f"margin {margin} must be in [0, {size / 2})")

    min_bound = margin
    max_bound = size - margin
    if min_bound <= x <= max_bound and min_bound <= y <= max_bound:
        return ClampResult(x, y, False)

    centre = size / 2
    ddx = x - centre
    ddy = y - centre
    if ddx == 0 and ddy == 0:
        return ClampResult(x, y, False)

    # Scale along the ray needed to reach the bound on each axis
    if ddx > 0:
        scale_x = (max_bound - centre) / ddx
    elif ddx < 0:
        scale_x = (min_bound - centre) / ddx
    else:
        scale_x = math.inf
    if ddy > 0:
        scale_y = (max_bound - centre) / ddy
    elif ddy < 0:
        scale_y = (min_bound - centre) / ddy
    else:
        scale_y = math.inf
    scale = min(abs(scale_x), abs(scale_y))

    cx = centre + ddx * scale
    cy = centre + ddy * scale
    # Floating point can overshoot the box by a hair
    cx = max(min_bound, min(max_bound, cx))
    cy = max(min_bound, min(max_bound, cy))
    return ClampResult(cx, cy, True, math.atan2(ddy, ddx))
