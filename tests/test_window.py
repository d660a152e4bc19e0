import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from eventzgame.window import (
    WINDOWPOS_CENTERED,
    GameWindow,
    background_colors,
    xpm_to_surface,
)
from eventzgame.xpm import XPMError, read_xpm_from_array


SMALL_XPM = ["2 1 2 1", "a c #ff0000", "b c None", "ab"]


def _many_colours_xpm():
    keys = [f"{chr(65 + i // 26)}{chr(97 + i % 26)}" for i in range(257)]
    lines = ["4 2 257 2"]
    lines += [f"{key} c #{(i * 1000) & 0xFFFFFF:06x}" for i, key in enumerate(keys)]
    lines.append("".join(keys[0:4]))
    lines.append("".join(keys[253:257]))
    return lines


@pytest.fixture
def window():
    win = GameWindow("Test Window", WINDOWPOS_CENTERED, WINDOWPOS_CENTERED, 64, 48, 0)
    yield win
    win.close()


def test_background_colors_length_and_alpha():
    colors = list(background_colors())
    assert len(colors) == 255
    assert all(color[3] == 255 for color in colors)


def test_background_colors_wrap_below_zero():
    first = next(background_colors())
    assert first == (246, 236, 226, 255)


def test_background_colors_channel_spacing():
    colors = list(background_colors())
    for r, g, b, _ in colors[30:]:
        assert r - g == 10
        assert g - b == 10
    assert all(0 <= c <= 255 for color in colors for c in color)


def test_indexed_surface_matches_image():
    image = read_xpm_from_array(SMALL_XPM)
    surface = xpm_to_surface(image)
    assert surface.get_size() == (2, 1)
    assert surface.get_bitsize() == 8
    assert tuple(surface.get_at((0, 0)))[:3] == (255, 0, 0)
    for x in range(image.width):
        rgb = image.pixel_rgb(x, 0)
        expected = ((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)
        assert tuple(surface.get_at((x, 0)))[:3] == expected


def test_indexed_surface_colorkey():
    surface = xpm_to_surface(read_xpm_from_array(SMALL_XPM))
    assert tuple(surface.get_colorkey())[:3] == (255, 255, 255)


def test_surface_without_transparency_has_no_colorkey():
    surface = xpm_to_surface(read_xpm_from_array(["1 1 1 1", "a c #00ff00", "a"]))
    assert surface.get_colorkey() is None


def test_truecolor_surface_matches_image():
    image = read_xpm_from_array(_many_colours_xpm())
    assert not image.indexed
    surface = xpm_to_surface(image)
    assert surface.get_bitsize() == 32
    for y in range(image.height):
        for x in range(image.width):
            rgb = image.pixel_rgb(x, y)
            expected = ((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)
            assert tuple(surface.get_at((x, y)))[:3] == expected


def test_window_caption_and_size(window):
    assert pygame.display.get_caption()[0] == "Test Window"
    assert window.screen.get_size() == (64, 48)


def test_draw_background_ends_on_last_colour(window):
    window.draw_background()
    last = list(background_colors())[-1]
    assert tuple(window.screen.get_at((0, 0)))[:3] == last[:3]


def test_set_icon_returns_icon_surface(window):
    icon = window.set_icon(SMALL_XPM)
    assert icon.get_size() == (2, 1)


def test_set_icon_rejects_bad_data(window):
    with pytest.raises(XPMError):
        window.set_icon(["not a header"])


def test_close_shuts_down_display():
    win = GameWindow("Closing", 10, 20, 32, 32, 0)
    assert win.screen.get_size() == (32, 32)
    assert pygame.display.get_caption()[0] == "Closing"
    win.close()
    assert pygame.display.get_init() is False


def test_context_manager_closes():
    with GameWindow("Ctx", WINDOWPOS_CENTERED, WINDOWPOS_CENTERED, 16, 16) as win:
        assert win.screen.get_size() == (16, 16)
    assert pygame.display.get_init() is False