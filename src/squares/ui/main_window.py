"""MainWindow — top-level window that hosts the board and drives the tick loop."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from squares.core.board import Cell, Edge
from squares.core.enums import Player
from squares.game.controller import GameController
from squares.game.snapshot import FrameSnapshot
from squares.ui.board.board_view import BoardView
from squares.ui.settings import AppSettings, apply_settings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Squares."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or AppSettings()
        self.setWindowTitle(self._settings.title)
        self.resize(self._settings.window_width, self._settings.window_height)

        self._controller = GameController()
        self._tick_timer = QTimer(self)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_settings()

        self._tick_timer.start()
        self._update_turn_label(self._controller.current_player)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    # ── Setup ────────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_view = BoardView(
            self._controller.mapper, self._controller.board.points_per_side
        )
        self.setCentralWidget(self._board_view)

        self._turn_label = QLabel()
        status = QStatusBar()
        status.addWidget(self._turn_label)
        self.setStatusBar(status)

    def _setup_menu(self) -> None:
        menu = self.menuBar()
        if menu is None:
            return
        game_menu = menu.addMenu("&Game")
        if game_menu is None:
            return

        self._act_new = QAction("&New Game", self)
        self._act_new.setShortcut("Ctrl+N")
        self._act_new.triggered.connect(self._on_new_game)
        game_menu.addAction(self._act_new)

        game_menu.addSeparator()

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        game_menu.addAction(self._act_quit)

    def _connect_signals(self) -> None:
        self._tick_timer.timeout.connect(self._on_tick)
        self._controller.add_sink(self._board_view.board_scene.sink)

        ev = self._controller.events
        ev.on_edge_activated.append(self._on_edge_activated)
        ev.on_cells_claimed.append(self._on_cells_claimed)
        ev.on_turn_resolved.append(self._update_turn_label)

    def _apply_settings(self) -> None:
        apply_settings(self)

    # ── Tick loop ────────────────────────────────────────────────────────

    def _on_tick(self) -> FrameSnapshot:
        sample = self._board_view.board_scene.take_input()
        return self._controller.tick(sample)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_new_game(self) -> None:
        self._controller.new_game()
        self._controller.tick(self._board_view.board_scene.take_input())

    def _on_edge_activated(self, edge: Edge, player: Player) -> None:
        _LOGGER.debug("%s claimed %r", player, edge)

    def _on_cells_claimed(self, cells: list[Cell], player: Player) -> None:
        _LOGGER.info(
            "%s took %s", player, ", ".join(str(cell.location) for cell in cells)
        )

    def _update_turn_label(self, player: Player) -> None:
        self._turn_label.setText(f"Turn: {str(player).capitalize()}")

    # ── Lifecycle ────────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._tick_timer.stop()
        super().closeEvent(event)
