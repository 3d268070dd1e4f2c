"""TurnEngine — edge activation, cell completion and turn advancement."""

from __future__ import annotations

import logging

from squares.core.board import Board, Cell, Edge
from squares.core.types import EdgeId
from squares.game.highlight import HighlightSelector
from squares.game.state import TurnState

_LOGGER = logging.getLogger(__name__)


class TurnEngine:
    """State machine over :class:`TurnState`.

    A step is two phases run in order:

    1. :meth:`activate_highlighted` claims the highlighted edge on click.
    2. :meth:`resolve` awards every newly completed cell to the current
       player, then either keeps the turn (something was completed) or
       passes it.
    """

    __slots__ = ("_board", "_state", "_highlight")

    def __init__(
        self, board: Board, state: TurnState, highlight: HighlightSelector
    ) -> None:
        self._board = board
        self._state = state
        self._highlight = highlight

    @property
    def state(self) -> TurnState:
        return self._state

    # ── Activation ───────────────────────────────────────────────────────

    def activate_highlighted(self) -> Edge | None:
        """Claim the highlighted edge, if any. Returns the claimed edge."""
        edge = self._highlight.highlighted
        if edge is None:
            _LOGGER.debug("Click ignored: nothing highlighted")
            return None
        self._highlight.clear()
        if not self.activate(edge.id):
            return None
        return edge

    def activate(self, edge_id: EdgeId) -> bool:
        """Claim *edge_id* directly. Already activated edges are left alone."""
        edge = self._board.edge(edge_id)
        if not edge.activate():
            _LOGGER.debug("Redundant activation of %r ignored", edge)
            return False
        if self._highlight.is_highlighted(edge_id):
            self._highlight.clear()
        self._state.pending_resolution = True
        _LOGGER.debug("%s activated %r", self._state.current_player, edge)
        return True

    # ── Resolution ───────────────────────────────────────────────────────

    def resolve(self) -> list[Cell]:
        """Run the completion check for a pending activation.

        Returns the cells claimed in this pass (empty when nothing was
        pending or nothing completed).
        """
        if not self._state.pending_resolution:
            return []

        player = self._state.current_player
        claimed: list[Cell] = []
        for cell in self._board.unowned_cells():
            if self._board.is_complete(cell) and cell.claim(player):
                claimed.append(cell)

        if claimed:
            _LOGGER.debug(
                "%s completed %s and keeps the turn",
                player,
                ", ".join(str(cell.location) for cell in claimed),
            )
        else:
            self._state.pass_turn()
            _LOGGER.debug("Turn passes to %s", self._state.current_player)

        self._state.pending_resolution = False
        return claimed
