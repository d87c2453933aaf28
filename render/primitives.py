"""Backend-neutral draw primitives emitted by the minimap renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

Colour = Tuple[int, ...]
Point = Tuple[float, float]


@dataclass(frozen=True)
class FillRect:
    x: float
    y: float
    width: float
    height: float
    colour: Colour


@dataclass(frozen=True)
class Polygon:
    points: Tuple[Point, ...]
    colour: Colour
    outline: Optional[Colour] = None
    outline_width: int = 1


@dataclass(frozen=True)
class Circle:
    centre: Point
    radius: float
    colour: Optional[Colour]
    outline: Optional[Colour] = None
    outline_width: int = 1


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    colour: Colour
    width: int = 1


Primitive = Union[FillRect, Polygon, Circle, Line]
