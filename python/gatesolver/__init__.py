"""Breadth-first solver for gate sliding-block puzzles."""

__version__ = "0.1.0"
