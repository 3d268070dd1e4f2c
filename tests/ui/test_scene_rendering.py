"""Tests for BoardScene drawing, snapshot rendering and input sampling."""

from __future__ import annotations

import pytest
from PyQt6.QtCore import QPointF

from squares.core.enums import Alignment, Player
from squares.core.types import Point
from squares.game.controller import GameController
from squares.game.interfaces import TickInput
from squares.ui.board.board_scene import BoardScene
from squares.ui.styles.theme import BoardTheme


def test_scene_builds_items_for_whole_lattice() -> None:
    scene = BoardScene()
    assert len(scene._point_items) == 49
    assert len(scene._edge_items) == 84
    assert len(scene._cell_items) == 36
    assert all(not item.isVisible() for item in scene._cell_items.values())


def test_scene_rect_tracks_viewport() -> None:
    scene = BoardScene()
    scene.set_viewport_size(400, 300)
    rect = scene.sceneRect()
    assert (rect.width(), rect.height()) == (400, 300)
    assert scene.viewport.width == 400


def test_board_rect_flips_y_axis() -> None:
    scene = BoardScene()
    bottom = scene._board_rect(0, 0, 1, 0.1)
    top = scene._board_rect(0, 5, 1, 5.1)
    # Higher board rows are drawn nearer the top of the window
    assert top.top() < bottom.top()


def test_pointer_round_trips_through_mapper() -> None:
    scene = BoardScene()
    ctrl = GameController()
    centre = scene._board_rect(0.4, -0.05, 0.6, 0.05).center()
    px, py = scene._scene_to_window(centre)
    bx, by = ctrl.mapper.to_board(px, py, 710, 710)
    assert bx == pytest.approx(0.5)
    assert by == pytest.approx(0.0, abs=1e-9)


def test_take_input_resets_between_ticks() -> None:
    scene = BoardScene()
    scene._pointer = (10.0, 20.0)
    scene._left_pressed = True

    first = scene.take_input()
    assert first == TickInput(scene.viewport, pointer=(10.0, 20.0), left_pressed=True)

    second = scene.take_input()
    assert second.pointer is None
    assert not second.left_pressed


def test_scene_to_window_uses_bottom_left_origin() -> None:
    scene = BoardScene()
    assert scene._scene_to_window(QPointF(5.0, 710.0)) == (5.0, 0.0)


def test_sink_styles_highlight_activation_and_owner() -> None:
    scene = BoardScene()
    theme = BoardTheme.default()
    ctrl = GameController()
    ctrl.add_sink(scene.sink)

    cell = ctrl.board.cell_at(Point(2, 2))
    for handle in cell.edges:
        ctrl.activate(handle)
    hover = ctrl.mapper.to_window(4.5, 4.0, 710, 710)
    ctrl.tick(TickInput(scene.viewport, pointer=hover))

    assert cell.owner == Player.TWO
    owned = scene._cell_items[Point(2, 2)]
    assert owned.isVisible()
    assert owned.brush().color() == theme.player_two

    claimed = scene._edge_items[cell.edges[0]]
    assert claimed.brush().color() == theme.edge_activated

    lit_id = ctrl.board.edge_at(Point(4, 4), Alignment.HORIZONTAL).id
    assert scene._edge_items[lit_id].brush().color() == theme.edge_highlight


def test_set_show_points_toggles_dots() -> None:
    scene = BoardScene()
    scene.set_show_points(False)
    assert all(not item.isVisible() for item in scene._point_items.values())
    scene.set_show_points(True)
    assert all(item.isVisible() for item in scene._point_items.values())


def test_redraw_keeps_last_snapshot() -> None:
    scene = BoardScene()
    ctrl = GameController()
    ctrl.add_sink(scene.sink)
    eid = ctrl.board.edge_at(Point(0, 0), Alignment.VERTICAL).id
    ctrl.activate(eid)
    ctrl.tick(TickInput(scene.viewport))

    scene.set_theme(BoardTheme.night())
    assert scene._edge_items[eid].brush().color() == BoardTheme.night().edge_activated
