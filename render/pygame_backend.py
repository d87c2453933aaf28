from __future__ import annotations

"""Draw :mod:`render.primitives` onto a pygame surface."""

import math
from typing import Iterable, Tuple

import pygame

from render.primitives import Circle, FillRect, Line, Polygon, Primitive


def _shift(point: Tuple[float, float], offset: Tuple[float, float]) -> Tuple[float, float]:
    return point[0] + offset[0], point[1] + offset[1]


def draw_primitive(
    surface: pygame.Surface, prim: Primitive, offset: Tuple[float, float] = (0, 0)
) -> None:
    """Render a single primitive onto ``surface`` shifted by ``offset``."""
    if isinstance(prim, FillRect):
        x, y = _shift((prim.x, prim.y), offset)
        rect = pygame.Rect(
            math.floor(x),
            math.floor(y),
            math.ceil(prim.width),
            math.ceil(prim.height),
        )
        surface.fill(prim.colour, rect)
    elif isinstance(prim, Polygon):
        points = [_shift(p, offset) for p in prim.points]
        pygame.draw.polygon(surface, prim.colour, points)
        if prim.outline is not None:
            pygame.draw.polygon(surface, prim.outline, points, prim.outline_width)
    elif isinstance(prim, Circle):
        centre = _shift(prim.centre, offset)
        if prim.colour is not None:
            pygame.draw.circle(surface, prim.colour, centre, prim.radius)
        if prim.outline is not None:
            pygame.draw.circle(surface, prim.outline, centre, prim.radius, prim.outline_width)
    elif isinstance(prim, Line):
        pygame.draw.line(
            surface,
            prim.colour,
            _shift(prim.start, offset),
            _shift(prim.end, offset),
            prim.width,
        )
    else:
        raise TypeError(f"Unsupported primitive {prim!r}")


def draw_primitives(
    surface: pygame.Surface,
    primitives: Iterable[Primitive],
    offset: Tuple[float, float] = (0, 0),
) -> int:
    """Render ``primitives`` in order and return how many were drawn."""
    count = 0
    for prim in primitives:
        draw_primitive(surface, prim, offset)
        count += 1
    return count
