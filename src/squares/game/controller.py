"""GameController — runs one game step per tick.

Owns the board, turn state, highlight selector and turn engine, and
drives them in a fixed order every tick:

1. activation (if the left button was pressed),
2. completion check and turn decision,
3. highlight recomputation for the next step.

Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from squares.core.board import Board, Cell, Edge
from squares.core.enums import Player
from squares.core.geometry import CoordinateMapper
from squares.core.types import POINTS_PER_SIDE, EdgeId
from squares.game.engine import TurnEngine
from squares.game.highlight import HighlightSelector
from squares.game.interfaces import IRenderSink, TickInput, Viewport
from squares.game.snapshot import FrameSnapshot, project
from squares.game.state import TurnState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

EdgeCallback = Callable[[Edge, Player], None]  # edge, player who claimed it
CellsCallback = Callable[[list[Cell], Player], None]  # cells, new owner
TurnCallback = Callable[[Player], None]  # player to move after resolution
FrameCallback = Callable[[FrameSnapshot], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_edge_activated: list[EdgeCallback] = field(default_factory=list)
    on_cells_claimed: list[CellsCallback] = field(default_factory=list)
    on_turn_resolved: list[TurnCallback] = field(default_factory=list)
    on_frame: list[FrameCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Single-threaded update loop for one game.

    Thread-safety: every method must be called from the same thread
    (the Qt main thread in the shipped app). Nothing here blocks.
    """

    __slots__ = (
        "_board",
        "_state",
        "_highlight",
        "_engine",
        "_sinks",
        "_tick",
        "_pointer",
        "_viewport",
        "events",
    )

    def __init__(
        self,
        points_per_side: int = POINTS_PER_SIDE,
        mapper: CoordinateMapper | None = None,
    ) -> None:
        self._sinks: list[IRenderSink] = []
        self.events = GameEvents()
        self._setup(points_per_side, mapper)

    def _setup(self, points_per_side: int, mapper: CoordinateMapper | None) -> None:
        self._board = Board(points_per_side)
        self._state = TurnState()
        self._highlight = HighlightSelector(self._board, mapper)
        self._engine = TurnEngine(self._board, self._state, self._highlight)
        self._tick = 0
        self._pointer: tuple[float, float] | None = None
        self._viewport: Viewport | None = None

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> TurnState:
        return self._state

    @property
    def highlight(self) -> HighlightSelector:
        return self._highlight

    @property
    def engine(self) -> TurnEngine:
        return self._engine

    @property
    def mapper(self) -> CoordinateMapper:
        return self._highlight.mapper

    @property
    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def tick_count(self) -> int:
        return self._tick

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(self) -> None:
        """Discard the current board and start over with player one."""
        self._setup(self._board.points_per_side, self._highlight.mapper)
        size = self._board.points_per_side
        _LOGGER.info("New game on a %dx%d lattice", size, size)
        self._emit_turn(self._state.current_player)

    def add_sink(self, sink: IRenderSink) -> None:
        if sink not in self._sinks:
            self._sinks.append(sink)

    def remove_sink(self, sink: IRenderSink) -> None:
        if sink in self._sinks:
            self._sinks.remove(sink)

    # ── Update loop ──────────────────────────────────────────────────────

    def tick(self, sample: TickInput) -> FrameSnapshot:
        """Advance the game by one step and publish the resulting frame."""
        self._tick += 1
        self._viewport = sample.viewport
        if sample.pointer is not None:
            self._pointer = sample.pointer

        if sample.left_pressed:
            player = self._state.current_player
            edge = self._engine.activate_highlighted()
            if edge is not None:
                self._emit_edge(edge, player)

        self._resolve()

        if self._pointer is not None:
            self._highlight.update(self._pointer, self._viewport)
        else:
            self._highlight.clear()

        snapshot = self.snapshot()
        for sink in self._sinks:
            sink.render(snapshot)
        for cb in self.events.on_frame:
            cb(snapshot)
        return snapshot

    def activate(self, edge_id: EdgeId) -> bool:
        """Claim an edge outside of pointer input and resolve it at once.

        Returns False (and changes nothing) for an already activated edge.
        """
        player = self._state.current_player
        if not self._engine.activate(edge_id):
            return False
        self._emit_edge(self._board.edge(edge_id), player)
        self._resolve()
        return True

    def snapshot(self) -> FrameSnapshot:
        return project(self._board, self._state, self._highlight, self._tick)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _resolve(self) -> None:
        player = self._state.current_player
        was_pending = self._state.pending_resolution
        claimed = self._engine.resolve()
        if claimed:
            self._emit_cells(claimed, player)
        if was_pending:
            self._emit_turn(self._state.current_player)

    def _emit_edge(self, edge: Edge, player: Player) -> None:
        for cb in self.events.on_edge_activated:
            cb(edge, player)

    def _emit_cells(self, cells: list[Cell], player: Player) -> None:
        for cb in self.events.on_cells_claimed:
            cb(cells, player)

    def _emit_turn(self, player: Player) -> None:
        for cb in self.events.on_turn_resolved:
            cb(player)
