# eventzgame

A small game program built on pygame. It opens an 800×600 window titled
"SRB2EventZ The Game", centred on the screen, and keeps sweeping the
background colour from dark to light until the window is closed. An XPM
pixmap can be given as the window icon.

The package also has a self-contained reader for XPM (X PixMap, version 3)
images, which can be used on its own.

## Installing

```
pip install .
```

pygame is the only runtime dependency. To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the game

```
eventzgame
eventzgame --icon picture.xpm
```

Close the window to quit. `--icon` reads the quoted strings of an XPM file
and uses the image as the window icon; if the image cannot be decoded, a
message is printed to standard error and the game runs without it. If the
icon file cannot be read or the window cannot be created, the command prints
an error and exits with status 1.

## Reading XPM images

`eventzgame.xpm` reads XPMv3 data from a list of strings or from a binary
stream:

```python
from eventzgame.xpm import read_xpm_from_array, load_xpm, is_xpm, XPMError

image = read_xpm_from_array([
    "2 2 2 1",
    "a c #FF0000",
    "b c None",
    "ab",
    "ba",
], extended=False)

print(hex(image.pixel_rgb(0, 0)))   # 0xff0000
print(image.colorkey)               # 1, the palette index of "None"

with open("picture.xpm", "rb") as stream:
    if is_xpm(stream):
        image = load_xpm(stream, extended=True)
```

What the reader supports:

* The header `<width> <height> <ncolors> <chars-per-pixel>`; hotspot
  coordinates, if present, are ignored. Non-positive values are rejected.
* Colour definitions; symbolic (`s`) keys are skipped, and a key whose
  colour is not recognised is passed over in favour of the next one.
* Colours written as `#rgb`, `#rrggbb` or `#rrrrggggbbbb`; other `#` lengths
  raise `XPMError`.
* A few basic colour names (`none`, `black`, `white`, `red`, `green`,
  `blue`), or, with `extended=True`, the full X11 colour-name table from
  `eventzgame.colornames` (`lookup_color`, `extended_colors`), including the
  numbered greys from `eventzgame.greys` (`grey_level`, `grey_levels`).
  Names are matched ignoring case, against the first table entry that starts
  with the given name.
* `None` marks the transparent colour, which becomes the image's
  `colorkey`.

The result is an `XPMImage` with `width`, `height`, `indexed`, `palette`,
`pixels` and `colorkey`. Images with at most 256 colours come out as
palette-indexed pixels, larger ones as direct `0xRRGGBB` values;
`pixel_rgb(x, y)` gives the colour either way. Bad or truncated data raises
`XPMError`; `load_xpm` puts the stream back to where it started when reading
fails.

## Using the window directly

```python
from eventzgame.window import GameWindow, xpm_to_surface
from eventzgame.game import Game

with GameWindow("My window", 0, 0, 640, 480, 0) as window:
    Game(window).run()
```

`GameWindow` raises `WindowError` if the window cannot be created.
`set_icon(lines)` decodes XPM strings and sets them as the icon;
`xpm_to_surface(image)` turns an `XPMImage` into a pygame surface (8-bit
palette or 32-bit RGB, with the colour key set). `background_colors()`
yields the colours of one background sweep.

## What it does not do

There is no gameplay beyond the window and its background: the only event
handled is closing the window. No icon image is bundled with the package;
the window has an icon only when one is passed with `--icon` or `set_icon`.