"""A small pygame game window with an XPM image reader for its icon."""

__version__ = "0.1.0"
__all__ = ["colornames", "game", "greys", "window", "xpm"]