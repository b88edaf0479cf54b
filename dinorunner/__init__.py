"""Endless side-scrolling runner game: game rules, assets, rendering and the pygame window."""

__version__ = "0.1.0"