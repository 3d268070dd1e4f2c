"""Boundary contract between the game loop and the presentation layer.

The loop depends on these types only; the Qt window (or a test) supplies
input samples and receives frame snapshots through them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from squares.game.snapshot import FrameSnapshot


@dataclass(frozen=True, slots=True)
class Viewport:
    """Window size in pixels."""

    width: float
    height: float

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True, slots=True)
class TickInput:
    """Input sampled during one tick.

    Args:
        viewport: Current window size.
        pointer: Latest pointer position in window pixels (bottom-left
            origin), or ``None`` if the pointer did not move this tick.
        left_pressed: Whether the left button went down this tick.
    """

    viewport: Viewport
    pointer: tuple[float, float] | None = None
    left_pressed: bool = False


class IRenderSink(ABC):
    """Receives the output projection once per tick."""

    @abstractmethod
    def render(self, snapshot: FrameSnapshot) -> None:
        """Draw edges and cells as described by *snapshot*."""
