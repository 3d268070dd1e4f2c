"""Core enumerations for the squares domain."""

from __future__ import annotations

from enum import IntEnum


class Player(IntEnum):
    """One of the two participants."""

    ONE = 0
    TWO = 1

    @property
    def opposite(self) -> Player:
        return Player(1 - self.value)

    def __str__(self) -> str:
        return f"player {self.value + 1}"


class Alignment(IntEnum):
    """Orientation of an edge relative to its origin point."""

    HORIZONTAL = 0
    VERTICAL = 1
