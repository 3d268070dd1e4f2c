"""Application settings and helpers that push them onto a running window."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from squares.ui.styles.theme import theme_by_name

_ENV_PREFIX = "SQUARES_"


def _flag(raw: str) -> bool:
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# ── Settings data class ──────────────────────────────────────────────────────


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Window
    title: str = "Squares"
    window_width: int = 710
    window_height: int = 710

    # Board
    board_theme: str = "Classic"
    show_points: bool = True

    # Loop
    tick_interval_ms: int = 16  # ~60 ticks per second

    # Diagnostics
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults overridden by ``SQUARES_<FIELD>`` environment variables.

        Values that fail to parse keep their default.
        """
        source = os.environ if env is None else env
        settings = cls()
        for f in fields(cls):
            raw = source.get(_ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            default = getattr(settings, f.name)
            value: Any
            if isinstance(default, bool):
                value = _flag(raw)
            elif isinstance(default, int):
                try:
                    value = int(raw)
                except ValueError:
                    continue
            else:
                value = raw.strip()
            setattr(settings, f.name, value)
        settings.tick_interval_ms = max(1, settings.tick_interval_ms)
        return settings


# ── Applying settings ────────────────────────────────────────────────────────


def apply_settings(host: Any) -> None:
    """Push ``host._settings`` onto the window's board scene and timer."""
    s = host._settings

    host.setWindowTitle(s.title)

    scene = host._board_view.board_scene
    scene.set_theme(theme_by_name(s.board_theme))
    scene.set_show_points(s.show_points)

    host._tick_timer.setInterval(max(1, s.tick_interval_ms))
