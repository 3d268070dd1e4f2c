"""Squares — a dots and boxes game."""

__version__ = "0.1.0"
