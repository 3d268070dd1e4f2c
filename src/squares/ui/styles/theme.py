"""Visual theme constants and QSS styles for Squares."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from squares.core.enums import Player


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the lattice."""

    background: QColor
    point: QColor
    edge_idle: QColor  # unclaimed, not under the pointer
    edge_highlight: QColor  # claimable edge under the pointer
    edge_activated: QColor
    player_one: QColor  # fill for cells owned by player one
    player_two: QColor

    def player_color(self, player: Player) -> QColor:
        return self.player_one if player == Player.ONE else self.player_two

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            background=QColor(255, 255, 255),  # white
            point=QColor(0, 0, 0),
            edge_idle=QColor(0, 0, 0, 0),  # hidden until hovered
            edge_highlight=QColor(0, 0, 0, 110),
            edge_activated=QColor(0, 0, 0),
            player_one=QColor(255, 0, 0),  # red
            player_two=QColor(0, 255, 0),  # green
        )

    @classmethod
    def guided(cls) -> BoardTheme:
        """Like the default, but unclaimed edges stay faintly visible."""
        return cls(
            background=QColor(255, 255, 255),
            point=QColor(0, 0, 0),
            edge_idle=QColor(0, 0, 0, 25),
            edge_highlight=QColor(0, 0, 0, 110),
            edge_activated=QColor(0, 0, 0),
            player_one=QColor(255, 0, 0, 170),
            player_two=QColor(0, 255, 0, 170),
        )

    @classmethod
    def night(cls) -> BoardTheme:
        return cls(
            background=QColor(30, 30, 36),
            point=QColor(224, 224, 224),
            edge_idle=QColor(224, 224, 224, 20),
            edge_highlight=QColor(224, 224, 224, 120),
            edge_activated=QColor(224, 224, 224),
            player_one=QColor(214, 69, 65),
            player_two=QColor(76, 175, 80),
        )


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Guided": BoardTheme.guided(),
    "Night": BoardTheme.night(),
}


def theme_by_name(name: str) -> BoardTheme:
    """Look up a theme, falling back to the classic look."""
    return THEMES.get(name, BoardTheme.default())


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background-color: #ffffff;
}
QStatusBar {
    background-color: #f2f2f2;
    color: #202020;
    font-size: 13px;
}
QStatusBar QLabel {
    padding: 2px 8px;
}
"""
