"""BoardScene — QGraphicsScene that draws the lattice and samples pointer input."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
)

from squares.core.board import Board
from squares.core.enums import Alignment
from squares.core.geometry import CoordinateMapper
from squares.core.types import POINTS_PER_SIDE, EdgeId, Point
from squares.game.interfaces import IRenderSink, TickInput, Viewport
from squares.game.snapshot import EdgeView, FrameSnapshot
from squares.ui.styles.theme import BoardTheme

_EDGE_THICKNESS = 0.1  # board units
_POINT_RADIUS = 0.06


class BoardScene(QGraphicsScene):
    """Renders points, edges and owned cells; collects raw input.

    Scene coordinates equal window pixels with Qt's top-left origin; the
    board itself is placed with :meth:`CoordinateMapper.to_window`, the
    same projection used to map the pointer back, so drawing and hit
    testing always agree.
    """

    DEFAULT_SIZE = 710  # px, both axes

    def __init__(
        self,
        mapper: CoordinateMapper | None = None,
        points_per_side: int = POINTS_PER_SIDE,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._mapper = mapper or CoordinateMapper(extent=points_per_side)
        self._size = points_per_side
        self._theme = BoardTheme.default()
        self._show_points = True
        self._viewport = Viewport(self.DEFAULT_SIZE, self.DEFAULT_SIZE)
        self._snapshot: FrameSnapshot | None = None

        # Input gathered since the last tick
        self._pointer: tuple[float, float] | None = None
        self._left_pressed = False

        # Visual layers
        self._point_items: dict[Point, QGraphicsEllipseItem] = {}
        self._edge_items: dict[EdgeId, QGraphicsRectItem] = {}
        self._cell_items: dict[Point, QGraphicsRectItem] = {}

        self.sink = SceneRenderSink(self)
        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    def set_viewport_size(self, width: float, height: float) -> None:
        """Resize the drawing area to the hosting widget's pixel size."""
        self._viewport = Viewport(width, height)
        self._draw_board()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()

    def set_show_points(self, visible: bool) -> None:
        """Show or hide the lattice dots."""
        self._show_points = visible
        for item in self._point_items.values():
            item.setVisible(visible)

    def take_input(self) -> TickInput:
        """Return the input gathered since the previous call and reset it."""
        sample = TickInput(
            viewport=self._viewport,
            pointer=self._pointer,
            left_pressed=self._left_pressed,
        )
        self._pointer = None
        self._left_pressed = False
        return sample

    def apply_snapshot(self, snapshot: FrameSnapshot) -> None:
        """Restyle edges and cells from a frame snapshot."""
        self._snapshot = snapshot
        for view in snapshot.edges:
            item = self._edge_items.get(view.edge_id)
            if item is not None:
                self._style_edge(item, view)
        for cell in snapshot.cells:
            item = self._cell_items.get(cell.location)
            if item is None:
                continue
            if cell.owner is None:
                item.setVisible(False)
            else:
                item.setBrush(QBrush(self._theme.player_color(cell.owner)))
                item.setVisible(True)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw every item for the current viewport and theme."""
        self.clear()
        self._point_items.clear()
        self._edge_items.clear()
        self._cell_items.clear()

        self.setSceneRect(0, 0, self._viewport.width, self._viewport.height)
        self.setBackgroundBrush(QBrush(self._theme.background))
        no_pen = QPen(Qt.PenStyle.NoPen)
        last = self._size - 1

        for y in range(last):
            for x in range(last):
                rect = QGraphicsRectItem(self._board_rect(x, y, x + 1, y + 1))
                rect.setPen(no_pen)
                rect.setZValue(-0.1)
                rect.setVisible(False)
                self.addItem(rect)
                self._cell_items[Point(x, y)] = rect

        half = _EDGE_THICKNESS / 2
        for edge in Board(self._size).edges:
            x, y = edge.origin
            if edge.alignment == Alignment.HORIZONTAL:
                rect = QGraphicsRectItem(self._board_rect(x, y - half, x + 1, y + half))
            else:
                rect = QGraphicsRectItem(self._board_rect(x - half, y, x + half, y + 1))
            rect.setPen(no_pen)
            rect.setBrush(QBrush(self._theme.edge_idle))
            self.addItem(rect)
            self._edge_items[edge.id] = rect

        r = _POINT_RADIUS
        for y in range(self._size):
            for x in range(self._size):
                dot = QGraphicsEllipseItem(self._board_rect(x - r, y - r, x + r, y + r))
                dot.setPen(no_pen)
                dot.setBrush(QBrush(self._theme.point))
                dot.setZValue(1)
                dot.setVisible(self._show_points)
                self.addItem(dot)
                self._point_items[Point(x, y)] = dot

        if self._snapshot is not None:
            self.apply_snapshot(self._snapshot)

    def _style_edge(self, item: QGraphicsRectItem, view: EdgeView) -> None:
        if view.activated:
            color = self._theme.edge_activated
        elif view.highlighted:
            color = self._theme.edge_highlight
        else:
            color = self._theme.edge_idle
        item.setBrush(QBrush(color))
        item.setZValue(0.5 if view.visible else 0)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mouseMoveEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None:
            self._pointer = self._scene_to_window(event.scenePos())
        super().mouseMoveEvent(event)

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None and event.button() == Qt.MouseButton.LeftButton:
            self._pointer = self._scene_to_window(event.scenePos())
            self._left_pressed = True
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _scene_to_window(self, pos: QPointF) -> tuple[float, float]:
        """Scene position → window pixel with a bottom-left origin."""
        return pos.x(), self._viewport.height - pos.y()

    def _board_rect(
        self, left: float, bottom: float, right: float, top: float
    ) -> QRectF:
        """Board-space rectangle → scene rectangle."""
        w, h = self._viewport.width, self._viewport.height
        x0, y0 = self._mapper.to_window(left, bottom, w, h)
        x1, y1 = self._mapper.to_window(right, top, w, h)
        return QRectF(x0, h - y1, x1 - x0, y1 - y0)


class SceneRenderSink(IRenderSink):
    """Adapts :class:`BoardScene` to the loop's render-sink interface."""

    __slots__ = ("_scene",)

    def __init__(self, scene: BoardScene) -> None:
        self._scene = scene

    def render(self, snapshot: FrameSnapshot) -> None:
        self._scene.apply_snapshot(snapshot)
