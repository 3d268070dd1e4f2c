"""TurnState — whose turn it is and whether an activation awaits resolution."""

from __future__ import annotations

from dataclasses import dataclass

from squares.core.enums import Player


@dataclass(slots=True)
class TurnState:
    """Mutable turn bookkeeping, owned by the update loop.

    ``pending_resolution`` is raised the moment an edge is activated and
    lowered once the completion check for that activation has run.
    """

    current_player: Player = Player.ONE
    pending_resolution: bool = False

    def pass_turn(self) -> Player:
        """Hand the turn to the other player and return them."""
        self.current_player = self.current_player.opposite
        return self.current_player

    def reset(self) -> None:
        self.current_player = Player.ONE
        self.pending_resolution = False
