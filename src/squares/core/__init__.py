"""Core domain layer — lattice model and geometry with zero external dependencies.

Quick start::

    from squares.core import Board, CoordinateMapper, HitTester

    board = Board()
    tester = HitTester(board)
    coord = CoordinateMapper().to_board(355.0, 20.0, 710.0, 710.0)
    edge = tester.edge_at(*coord) if coord else None
"""

from squares.core.board import (
    Board,
    BoardConfigurationError,
    Cell,
    Edge,
    validate_topology,
)
from squares.core.enums import Alignment, Player
from squares.core.geometry import (
    BOARD_OFFSET,
    BOARD_SCALE,
    BoardCoord,
    CoordinateMapper,
    HitRegion,
    HitTester,
    hit_region,
)
from squares.core.types import (
    CELLS_PER_SIDE,
    POINTS_PER_SIDE,
    EdgeId,
    Point,
    is_valid_point,
)

__all__ = [
    # Enums
    "Alignment",
    "Player",
    # Types / helpers
    "CELLS_PER_SIDE",
    "POINTS_PER_SIDE",
    "EdgeId",
    "Point",
    "is_valid_point",
    # Domain objects
    "Board",
    "BoardConfigurationError",
    "Cell",
    "Edge",
    "validate_topology",
    # Geometry
    "BOARD_OFFSET",
    "BOARD_SCALE",
    "BoardCoord",
    "CoordinateMapper",
    "HitRegion",
    "HitTester",
    "hit_region",
]
