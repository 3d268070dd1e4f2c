"""Tests for HighlightSelector."""

import logging

import pytest

from squares.core.board import Board
from squares.core.enums import Alignment
from squares.core.geometry import CoordinateMapper
from squares.core.types import Point
from squares.game.highlight import HighlightSelector
from squares.game.interfaces import Viewport

VIEW = Viewport(710, 710)


def _pixels(bx: float, by: float) -> tuple[float, float]:
    return CoordinateMapper().to_window(bx, by, VIEW.width, VIEW.height)


class TestSelect:
    def test_highlights_hit_edge(self) -> None:
        board = Board()
        selector = HighlightSelector(board)
        edge = selector.select((0.5, 0.0))
        assert edge is board.edge_at(Point(0, 0), Alignment.HORIZONTAL)
        assert selector.highlighted is edge
        assert selector.is_highlighted(edge.id)

    def test_moving_away_clears(self) -> None:
        selector = HighlightSelector(Board())
        selector.select((0.5, 0.0))
        assert selector.select((2.5, 2.5)) is None
        assert selector.highlighted is None

    def test_moving_between_edges_keeps_one(self) -> None:
        board = Board()
        selector = HighlightSelector(board)
        first = selector.select((0.5, 0.0))
        second = selector.select((3.0, 3.5))
        assert first is not None and second is not None
        assert not selector.is_highlighted(first.id)
        assert selector.highlighted is second

    def test_activated_edge_is_never_highlighted(self) -> None:
        board = Board()
        edge = board.edge_at(Point(0, 0), Alignment.HORIZONTAL)
        edge.activate()
        selector = HighlightSelector(board)
        assert selector.select((0.5, 0.0)) is None
        assert selector.highlighted is None

    def test_none_clears(self) -> None:
        selector = HighlightSelector(Board())
        selector.select((0.5, 0.0))
        selector.select(None)
        assert selector.highlighted is None


class TestUpdate:
    def test_maps_window_pixels(self) -> None:
        board = Board()
        selector = HighlightSelector(board)
        edge = selector.update(_pixels(5.0, 5.5), VIEW)
        assert edge is board.edge_at(Point(5, 5), Alignment.VERTICAL)

    def test_no_pointer_means_no_highlight(self) -> None:
        selector = HighlightSelector(Board())
        selector.select((0.5, 0.0))
        assert selector.update(None, VIEW) is None
        assert selector.highlighted is None

    def test_degenerate_viewport_clears(self, caplog: pytest.LogCaptureFixture) -> None:
        selector = HighlightSelector(Board())
        selector.select((0.5, 0.0))
        with caplog.at_level(logging.DEBUG, logger="squares.game.highlight"):
            assert selector.update((10.0, 10.0), Viewport(0, 0)) is None
        assert selector.highlighted is None
        assert "degenerate viewport" in caplog.text

    def test_at_most_one_highlight_over_a_sweep(self) -> None:
        board = Board()
        selector = HighlightSelector(board)
        for i in range(0, 63):
            for j in range(0, 63):
                selector.select((i / 10, j / 10))
                lit = [e for e in board.edges if selector.is_highlighted(e.id)]
                assert len(lit) <= 1
