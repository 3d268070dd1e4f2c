"""Lattice point value object, edge handles and grid constants.

Board layout (origin at the bottom-left)::

    (0,6) ... (6,6)
      .         .
    (0,0) ... (6,0)

Horizontal edges span ``(x, y) -> (x + 1, y)``; vertical edges span
``(x, y) -> (x, y + 1)``.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

EdgeId: TypeAlias = int  # index into Board.edges

POINTS_PER_SIDE = 7
CELLS_PER_SIDE = POINTS_PER_SIDE - 1


@dataclass(frozen=True, slots=True, order=True)
class Point:
    """Immutable integer lattice coordinate."""

    x: int
    y: int

    @classmethod
    def containing(cls, bx: float, by: float) -> Point:
        """Lattice point at the lower-left of board coordinate ``(bx, by)``."""
        return cls(math.floor(bx), math.floor(by))

    def offset(self, dx: int, dy: int) -> Point:
        return Point(self.x + dx, self.y + dy)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def is_valid_point(point: Point, points_per_side: int = POINTS_PER_SIDE) -> bool:
    """Check whether *point* lies on a lattice of the given size."""
    return 0 <= point.x < points_per_side and 0 <= point.y < points_per_side
