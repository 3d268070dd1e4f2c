"""FrameSnapshot — read-only projection of game state for renderers."""

from __future__ import annotations

from dataclasses import dataclass

from squares.core.board import Board
from squares.core.enums import Alignment, Player
from squares.core.types import EdgeId, Point
from squares.game.highlight import HighlightSelector
from squares.game.state import TurnState


@dataclass(frozen=True, slots=True)
class EdgeView:
    edge_id: EdgeId
    origin: Point
    alignment: Alignment
    highlighted: bool
    activated: bool

    @property
    def visible(self) -> bool:
        """Whether a renderer should draw the edge as a stroke."""
        return self.highlighted or self.activated


@dataclass(frozen=True, slots=True)
class CellView:
    location: Point
    owner: Player | None


@dataclass(frozen=True, slots=True)
class FrameSnapshot:
    """Everything a renderer may use for one frame, and nothing else."""

    tick: int
    current_player: Player
    points_per_side: int
    edges: tuple[EdgeView, ...]
    cells: tuple[CellView, ...]

    @property
    def highlighted(self) -> EdgeView | None:
        return next((e for e in self.edges if e.highlighted), None)


def project(
    board: Board, state: TurnState, highlight: HighlightSelector, tick: int = 0
) -> FrameSnapshot:
    """Build a fresh snapshot from live core state."""
    edges = tuple(
        EdgeView(
            edge_id=edge.id,
            origin=edge.origin,
            alignment=edge.alignment,
            highlighted=highlight.is_highlighted(edge.id),
            activated=edge.activated,
        )
        for edge in board.edges
    )
    cells = tuple(CellView(cell.location, cell.owner) for cell in board.cells)
    return FrameSnapshot(
        tick=tick,
        current_player=state.current_player,
        points_per_side=board.points_per_side,
        edges=edges,
        cells=cells,
    )
