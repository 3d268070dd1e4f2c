"""Tests for TurnState and Player."""

from squares.core.enums import Player
from squares.game.state import TurnState


class TestTurnState:
    def test_defaults(self) -> None:
        state = TurnState()
        assert state.current_player == Player.ONE
        assert not state.pending_resolution

    def test_pass_turn_alternates(self) -> None:
        state = TurnState()
        assert state.pass_turn() == Player.TWO
        assert state.pass_turn() == Player.ONE

    def test_reset(self) -> None:
        state = TurnState(Player.TWO, True)
        state.reset()
        assert state == TurnState()


class TestPlayer:
    def test_opposite(self) -> None:
        assert Player.ONE.opposite == Player.TWO
        assert Player.TWO.opposite == Player.ONE

    def test_str(self) -> None:
        assert str(Player.ONE) == "player 1"
        assert str(Player.TWO) == "player 2"
