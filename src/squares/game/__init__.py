"""Game layer — turn state machine, highlight selection and the update loop.

Quick start::

    from squares.game import GameController, TickInput, Viewport

    ctrl = GameController()
    view = Viewport(710, 710)
    ctrl.tick(TickInput(view, pointer=(60.0, 12.0)))
    frame = ctrl.tick(TickInput(view, left_pressed=True))
"""

from squares.game.controller import GameController, GameEvents
from squares.game.engine import TurnEngine
from squares.game.highlight import HighlightSelector
from squares.game.interfaces import IRenderSink, TickInput, Viewport
from squares.game.snapshot import CellView, EdgeView, FrameSnapshot, project
from squares.game.state import TurnState

__all__ = [
    # Interfaces
    "IRenderSink",
    "TickInput",
    "Viewport",
    # Concrete
    "GameController",
    "GameEvents",
    "HighlightSelector",
    "TurnEngine",
    "TurnState",
    # Output projection
    "CellView",
    "EdgeView",
    "FrameSnapshot",
    "project",
]
