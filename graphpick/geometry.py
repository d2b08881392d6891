"""Planar metric helpers and pick regions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .types import Point, PointLike


def as_point(value: PointLike) -> Point:
    """Return ``value`` as a plain ``(x, y)`` float tuple."""

    x, y = value
    return float(x), float(y)


def squared_distance(ax: float, ay: float, bx: float, by: float) -> float:
    dx = ax - bx
    dy = ay - by
    return dx * dx + dy * dy


def segment_distance_sq(
    qx: float, qy: float, x1: float, y1: float, x2: float, y2: float
) -> Optional[float]:
    """Squared distance from ``(qx, qy)`` to the segment ``(x1, y1)-(x2, y2)``.

    Returns ``None`` when both endpoints coincide, since such a segment has no
    direction to project onto.
    """

    if x1 == x2 and y1 == y2:
        return None
    dx = x2 - x1
    dy = y2 - y1
    # parameter of the foot of the perpendicular on the infinite line
    b = ((qy - y1) * dy + (qx - x1) * dx) / (dx * dx + dy * dy)
    if b <= 0:
        return squared_distance(qx, qy, x1, y1)
    if b >= 1:
        return squared_distance(qx, qy, x2, y2)
    return squared_distance(qx, qy, x1 + b * dx, y1 + b * dy)


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle anchored at its minimum corner.

    Containment is inclusive on the minimum edges and exclusive on the
    maximum edges, so adjacent rectangles never both claim a point on their
    shared border. A rectangle with non-positive width or height is empty.
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_corners(cls, x0: float, y0: float, x1: float, y1: float) -> "Rectangle":
        """Build a rectangle from two opposite corners given in any order."""

        left, right = min(x0, x1), max(x0, x1)
        top, bottom = min(y0, y1), max(y0, y1)
        return cls(left, top, right - left, bottom - top)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def contains(self, x: float, y: float) -> bool:
        if self.is_empty:
            return False
        return self.x <= x < self.max_x and self.y <= y < self.max_y


class Polygon:
    """Closed planar polygon tested with the even-odd rule."""

    def __init__(self, vertices: Sequence[PointLike]):
        arr = np.asarray(vertices, dtype=float)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError("polygon vertices must be a sequence of (x, y) pairs")
        if arr.shape[0] < 3:
            raise ValueError(f"polygon needs at least 3 vertices, got {arr.shape[0]}")
        arr.setflags(write=False)
        self.vertices = arr

    def __repr__(self) -> str:
        return f"Polygon(n={self.vertices.shape[0]})"

    def contains_points(self, points: Sequence[PointLike]) -> np.ndarray:
        """Vectorised containment test; returns a boolean array, one per point."""

        pts = np.asarray(points, dtype=float).reshape(-1, 2)
        px = pts[:, 0][:, None]
        py = pts[:, 1][:, None]
        xi = self.vertices[:, 0][None, :]
        yi = self.vertices[:, 1][None, :]
        xj = np.roll(self.vertices[:, 0], 1)[None, :]
        yj = np.roll(self.vertices[:, 1], 1)[None, :]

        straddles = (yi > py) != (yj > py)
        # horizontal edges never straddle, so their nan/inf crossings are masked out
        with np.errstate(divide="ignore", invalid="ignore"):
            x_cross = xi + (py - yi) * (xj - xi) / (yj - yi)
        crossings = straddles & (px < x_cross)
        return np.count_nonzero(crossings, axis=1) % 2 == 1

    def contains(self, x: float, y: float) -> bool:
        return bool(self.contains_points([(x, y)])[0])


__all__ = [
    "as_point",
    "squared_distance",
    "segment_distance_sq",
    "Rectangle",
    "Polygon",
]
