"""BoardView — QGraphicsView wrapper for the board scene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPainter, QResizeEvent
from PyQt6.QtWidgets import QFrame, QGraphicsView, QSizePolicy

from squares.core.geometry import CoordinateMapper
from squares.core.types import POINTS_PER_SIDE
from squares.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Displays the board scene one-to-one with widget pixels.

    The scene is resized rather than scaled, so scene coordinates stay
    equal to window pixels and the pointer mapping needs no view transform.
    """

    def __init__(
        self,
        mapper: CoordinateMapper | None = None,
        points_per_side: int = POINTS_PER_SIDE,
        parent=None,
    ) -> None:
        self._scene = BoardScene(mapper, points_per_side)
        super().__init__(self._scene, parent)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(240, 240)

        # Hover must reach the scene without a button held down
        self.setMouseTracking(True)
        self.viewport().setMouseTracking(True)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        size = self.viewport().size()
        self._scene.set_viewport_size(size.width(), size.height())
