"""Game start-up and main loop."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Protocol, Sequence

import pygame

from eventzgame.window import WINDOWPOS_CENTERED, GameWindow, WindowError
from eventzgame.xpm import XPMError

TITLE = "SRB2EventZ The Game"
WIDTH = 800
HEIGHT = 600

_QUOTED = re.compile(r'"([^"]*)"')


class _Drawable(Protocol):
    def draw_background(self) -> None: ...


class Game:
    """Runs the event loop over a window until a quit event arrives."""

    def __init__(self, window: _Drawable) -> None:
        self.window = window
        self.running = False

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one event; a quit event stops the loop."""
        if event.type == pygame.QUIT:
            self.running = False

    def loop(self) -> None:
        """Handle pending events and redraw, for as long as the game runs."""
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            self.window.draw_background()

    def run(self) -> None:
        """Start the game and block until it ends."""
        self.running = True
        self.loop()


def _read_icon_lines(path: Path) -> list[str]:
    return _QUOTED.findall(path.read_text(encoding="latin-1"))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="eventzgame", description=TITLE)
    parser.add_argument("--icon", type=Path, help="XPM file to use as window icon")
    args = parser.parse_args(argv)

    icon_lines = None
    if args.icon is not None:
        try:
            icon_lines = _read_icon_lines(args.icon)
        except OSError as exc:
            print(f"{TITLE} Error: {exc}", file=sys.stderr)
            return 1

    try:
        window = GameWindow(TITLE, WINDOWPOS_CENTERED, WINDOWPOS_CENTERED, WIDTH, HEIGHT, 0)
    except WindowError as exc:
        print(f"{TITLE} Error: {exc}", file=sys.stderr)
        return 1

    with window:
        if icon_lines is not None:
            try:
                window.set_icon(icon_lines)
            except XPMError as exc:
                print(f"{TITLE}: icon not loaded: {exc}", file=sys.stderr)
        Game(window).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())