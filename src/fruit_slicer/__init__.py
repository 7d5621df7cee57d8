"""Arcade fruit slicing game: swipe simulation on an OpenCV front-end."""

__version__ = "0.1.0"
