"""Tests for AppSettings and applying them to a window."""

from __future__ import annotations

from types import SimpleNamespace

from squares.ui import settings as settings_mod
from squares.ui.settings import AppSettings
from squares.ui.styles.theme import BoardTheme


class _StubScene:
    def __init__(self) -> None:
        self.theme: BoardTheme | None = None
        self.points: list[bool] = []

    def set_theme(self, theme: BoardTheme) -> None:
        self.theme = theme

    def set_show_points(self, visible: bool) -> None:
        self.points.append(visible)


class _StubTimer:
    def __init__(self) -> None:
        self.interval = 0

    def setInterval(self, ms: int) -> None:
        self.interval = ms


def test_apply_settings_updates_scene_and_timer() -> None:
    scene = _StubScene()
    timer = _StubTimer()
    titles: list[str] = []
    host = SimpleNamespace(
        _settings=AppSettings(board_theme="Night", show_points=False, tick_interval_ms=0),
        _board_view=SimpleNamespace(board_scene=scene),
        _tick_timer=timer,
        setWindowTitle=titles.append,
    )

    settings_mod.apply_settings(host)

    assert titles == ["Squares"]
    assert scene.theme == BoardTheme.night()
    assert scene.points == [False]
    assert timer.interval == 1


def test_unknown_theme_falls_back_to_default() -> None:
    scene = _StubScene()
    host = SimpleNamespace(
        _settings=AppSettings(board_theme="Nope"),
        _board_view=SimpleNamespace(board_scene=scene),
        _tick_timer=_StubTimer(),
        setWindowTitle=lambda _t: None,
    )
    settings_mod.apply_settings(host)
    assert scene.theme == BoardTheme.default()


def test_from_env_overrides_fields() -> None:
    settings = AppSettings.from_env(
        {
            "SQUARES_TITLE": " Boxes ",
            "SQUARES_SHOW_POINTS": "no",
            "SQUARES_TICK_INTERVAL_MS": "33",
            "SQUARES_LOG_LEVEL": "debug",
            "UNRELATED": "x",
        }
    )
    assert settings.title == "Boxes"
    assert settings.show_points is False
    assert settings.tick_interval_ms == 33
    assert settings.log_level == "debug"
    assert settings.window_width == 710


def test_from_env_ignores_unparseable_numbers() -> None:
    settings = AppSettings.from_env({"SQUARES_WINDOW_WIDTH": "wide"})
    assert settings.window_width == 710


def test_from_env_clamps_tick_interval() -> None:
    settings = AppSettings.from_env({"SQUARES_TICK_INTERVAL_MS": "-5"})
    assert settings.tick_interval_ms == 1
