"""The game window: creation, background drawing and the window icon."""

from __future__ import annotations

import os
from typing import Iterable, Iterator

import pygame

from eventzgame.xpm import XPMImage, read_xpm_from_array

WINDOWPOS_CENTERED = 0x2FFF0000
BACKGROUND_STEPS = 255


class WindowError(Exception):
    """Raised when the game window cannot be created."""


def background_colors() -> Iterator[tuple[int, int, int, int]]:
    """Yield the RGBA colours of one background sweep, in drawing order.

    Each channel is one byte, so values below zero wrap around.
    """
    for step in range(BACKGROUND_STEPS):
        yield ((step - 10) & 0xFF, (step - 20) & 0xFF, (step - 30) & 0xFF, 255)


def _split_rgb(value: int) -> tuple[int, int, int]:
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def xpm_to_surface(image: XPMImage) -> pygame.Surface:
    """Build a surface from a decoded XPM image.

    Indexed images become 8-bit palette surfaces, others 32-bit RGB ones.
    The image's colour key, if any, is set on the surface.
    """
    size = (image.width, image.height)
    if image.indexed:
        surface = pygame.Surface(size, 0, 8)
        surface.set_palette([_split_rgb(value) for value in image.palette])
    else:
        surface = pygame.Surface(size, 0, 32, (0xFF0000, 0x00FF00, 0x0000FF, 0))

    mask = 0xFF if image.indexed else 0xFFFFFF
    pixels = pygame.PixelArray(surface)
    try:
        for y, row in enumerate(image.pixels):
            for x, value in enumerate(row):
                pixels[x, y] = value & mask
    finally:
        pixels.close()

    if image.colorkey is not None:
        surface.set_colorkey(image.colorkey & mask)
    return surface


def _place_window(x: int, y: int) -> None:
    if x == WINDOWPOS_CENTERED or y == WINDOWPOS_CENTERED:
        os.environ.pop("SDL_VIDEO_WINDOW_POS", None)
        os.environ["SDL_VIDEO_CENTERED"] = "1"
    else:
        os.environ.pop("SDL_VIDEO_CENTERED", None)
        os.environ["SDL_VIDEO_WINDOW_POS"] = f"{x},{y}"


class GameWindow:
    """The single game window and its drawing surface."""

    def __init__(
        self, title: str, x: int, y: int, width: int, height: int, flags: int = 0
    ) -> None:
        _place_window(x, y)
        try:
            pygame.display.init()
            self.screen = pygame.display.set_mode((width, height), flags)
        except pygame.error as exc:
            raise WindowError(str(exc)) from exc
        pygame.display.set_caption(title)
        self.title = title

    def draw_background(self) -> None:
        """Sweep the whole window through the background colours."""
        for color in background_colors():
            self.screen.fill(color[:3])
            pygame.display.flip()

    def set_icon(self, xpm_lines: Iterable[str]) -> pygame.Surface:
        """Use the XPM image given by its strings as the window icon."""
        icon = xpm_to_surface(read_xpm_from_array(xpm_lines))
        pygame.display.set_icon(icon)
        return icon

    def close(self) -> None:
        """Destroy the window."""
        pygame.display.quit()

    def __enter__(self) -> GameWindow:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()