"""Pointer-to-board mapping and edge hit-testing.

Board space uses the lattice units of :class:`~squares.core.types.Point`
with the origin at the bottom-left. Window space is in pixels, also with
a bottom-left origin; UI toolkits that count rows downwards must flip
the y axis before calling :meth:`CoordinateMapper.to_board`.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from squares.core.enums import Alignment
from squares.core.types import POINTS_PER_SIDE

if TYPE_CHECKING:
    from squares.core.board import Board, Edge

BoardCoord: TypeAlias = tuple[float, float]

BOARD_SCALE = 0.9  # fraction of the viewport the lattice extent fills
BOARD_OFFSET = 0.1  # margin compensation, same on both axes
HIT_INSET = 0.1  # dead zone at each end of an edge
HIT_HALF_WIDTH = 0.1  # half thickness of the selectable band


# ── Coordinate mapping ───────────────────────────────────────────────────────


class CoordinateMapper:
    """Inverse of the camera projection used to draw the board.

    ``board = pixel / (width, height) * extent * scale - offset``
    """

    __slots__ = ("_extent", "_scale", "_offset")

    def __init__(
        self,
        extent: float = POINTS_PER_SIDE,
        scale: float = BOARD_SCALE,
        offset: float = BOARD_OFFSET,
    ) -> None:
        self._extent = extent
        self._scale = scale
        self._offset = offset

    @property
    def extent(self) -> float:
        return self._extent

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def offset(self) -> float:
        return self._offset

    def to_board(
        self, px: float, py: float, width: float, height: float
    ) -> BoardCoord | None:
        """Window pixel ``(px, py)`` → board coordinate.

        Returns ``None`` for a degenerate (zero or negative size) window.
        """
        if width <= 0 or height <= 0:
            return None
        k = self._extent * self._scale
        return (px / width * k - self._offset, py / height * k - self._offset)

    def to_window(
        self, bx: float, by: float, width: float, height: float
    ) -> BoardCoord:
        """Board coordinate → window pixel; exact inverse of :meth:`to_board`."""
        k = self._extent * self._scale
        return ((bx + self._offset) / k * width, (by + self._offset) / k * height)

    def units_to_pixels(self, length: float, size: float) -> float:
        """Convert a board-space length to pixels along an axis of *size* px."""
        return length / (self._extent * self._scale) * size


# ── Hit regions ──────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class HitRegion:
    """Open axis-aligned rectangle; points on the border are outside."""

    left: float
    bottom: float
    right: float
    top: float

    def contains(self, bx: float, by: float) -> bool:
        return self.left < bx < self.right and self.bottom < by < self.top

    def overlaps(self, other: HitRegion) -> bool:
        return (
            self.left < other.right
            and other.left < self.right
            and self.bottom < other.top
            and other.bottom < self.top
        )


def hit_region(edge: Edge) -> HitRegion:
    """Selectable band covering the middle of *edge*."""
    x, y = edge.origin.x, edge.origin.y
    if edge.alignment == Alignment.HORIZONTAL:
        return HitRegion(
            x + HIT_INSET, y - HIT_HALF_WIDTH, x + 1 - HIT_INSET, y + HIT_HALF_WIDTH
        )
    return HitRegion(
        x - HIT_HALF_WIDTH, y + HIT_INSET, x + HIT_HALF_WIDTH, y + 1 - HIT_INSET
    )


class HitTester:
    """Finds the edge, if any, under a board coordinate.

    Regions are disjoint for a well-formed lattice. Should two ever
    overlap, the edge that comes first in board order wins.
    """

    __slots__ = ("_board", "_regions")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._regions: tuple[HitRegion, ...] = tuple(
            hit_region(edge) for edge in board.edges
        )

    @property
    def regions(self) -> tuple[HitRegion, ...]:
        """Hit regions indexed by edge id."""
        return self._regions

    def candidates(self, bx: float, by: float) -> Iterator[Edge]:
        """Every edge whose region contains the coordinate, in board order."""
        for edge, region in zip(self._board.edges, self._regions):
            if region.contains(bx, by):
                yield edge

    def edge_at(self, bx: float, by: float) -> Edge | None:
        return next(self.candidates(bx, by), None)
