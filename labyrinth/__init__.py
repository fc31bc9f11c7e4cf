"""Labyrinth: grid-maze loading, play and solving."""

__version__ = "1.0.0"
