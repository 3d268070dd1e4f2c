"""Tests for MainWindow wiring and the tick loop."""

from __future__ import annotations

from squares.core.enums import Alignment, Player
from squares.core.types import Point
from squares.ui.main_window import MainWindow
from squares.ui.settings import AppSettings


def _hover(window: MainWindow, bx: float, by: float) -> None:
    scene = window.board_view.board_scene
    vp = scene.viewport
    scene._pointer = window.controller.mapper.to_window(bx, by, vp.width, vp.height)


def test_window_uses_settings() -> None:
    window = MainWindow(AppSettings(title="Boxes", tick_interval_ms=40))
    assert window.windowTitle() == "Boxes"
    assert window._tick_timer.interval() == 40
    assert window._tick_timer.isActive()


def test_tick_feeds_scene_input_to_controller() -> None:
    window = MainWindow()
    window._tick_timer.stop()

    _hover(window, 2.5, 3.0)
    window._on_tick()
    window.board_view.board_scene._left_pressed = True
    window._on_tick()

    edge = window.controller.board.edge_at(Point(2, 3), Alignment.HORIZONTAL)
    assert edge.activated
    assert window.controller.current_player == Player.TWO
    assert window._turn_label.text() == "Turn: Player 2"


def test_new_game_resets_controller() -> None:
    window = MainWindow()
    window._tick_timer.stop()
    window.controller.activate(0)

    window._act_new.trigger()

    assert window.controller.board.activated_count() == 0
    assert window._turn_label.text() == "Turn: Player 1"


def test_close_stops_timer() -> None:
    window = MainWindow()
    window.show()
    window.close()
    assert not window._tick_timer.isActive()
