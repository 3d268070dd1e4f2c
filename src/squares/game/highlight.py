"""HighlightSelector — keeps at most one claimable edge highlighted."""

from __future__ import annotations

import logging

from squares.core.board import Board, Edge
from squares.core.geometry import BoardCoord, CoordinateMapper, HitTester
from squares.core.types import EdgeId
from squares.game.interfaces import Viewport

_LOGGER = logging.getLogger(__name__)


class HighlightSelector:
    """Recomputes the highlighted edge from the pointer once per tick.

    The highlight is a single optional handle, so "more than one edge
    highlighted" cannot be represented. Activated edges are never
    highlighted.
    """

    __slots__ = ("_board", "_mapper", "_tester", "_highlighted")

    def __init__(
        self,
        board: Board,
        mapper: CoordinateMapper | None = None,
        tester: HitTester | None = None,
    ) -> None:
        self._board = board
        self._mapper = mapper or CoordinateMapper(extent=board.points_per_side)
        self._tester = tester or HitTester(board)
        self._highlighted: EdgeId | None = None

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def mapper(self) -> CoordinateMapper:
        return self._mapper

    @property
    def tester(self) -> HitTester:
        return self._tester

    @property
    def highlighted(self) -> Edge | None:
        if self._highlighted is None:
            return None
        return self._board.edge(self._highlighted)

    def is_highlighted(self, edge_id: EdgeId) -> bool:
        return self._highlighted == edge_id

    # ── Per-tick update ──────────────────────────────────────────────────

    def update(
        self, pointer: tuple[float, float] | None, viewport: Viewport
    ) -> Edge | None:
        """Map a window-pixel pointer and highlight whatever it hits."""
        if pointer is None:
            return self.select(None)
        coord = self._mapper.to_board(
            pointer[0], pointer[1], viewport.width, viewport.height
        )
        if coord is None:
            _LOGGER.debug("Ignoring pointer on degenerate viewport %s", viewport)
        return self.select(coord)

    def select(self, coord: BoardCoord | None) -> Edge | None:
        """Highlight the edge under board coordinate *coord*, clearing any other."""
        edge = self._tester.edge_at(*coord) if coord is not None else None
        if edge is not None and edge.activated:
            edge = None

        new_id = edge.id if edge is not None else None
        if new_id != self._highlighted:
            _LOGGER.debug("Highlight %s -> %s", self._highlighted, new_id)
        self._highlighted = new_id
        return edge

    def clear(self) -> None:
        self._highlighted = None
