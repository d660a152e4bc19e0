import io
import itertools
import string

import pytest

from eventzgame.xpm import (
    ColorHash,
    XPMError,
    color_to_rgb,
    hash_key,
    is_xpm,
    load_xpm,
    read_xpm_from_array,
)

SMALL = ["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"]

SMALL_FILE = (
    b"/* XPM */\n"
    b"static char *img[] = {\n"
    b'"2 2 2 1",\n'
    b'"a c #FF0000",\n'
    b'"b c None",\n'
    b'"ab",\n'
    b'"ba"\n'
    b"};\n"
)


def test_hash_key_stays_in_table():
    for key in ["a", "zz", "#$%", "longer key"]:
        assert 0 <= hash_key(key, 256) < 256


def test_hash_key_low_bits_agree_across_sizes():
    for key in ["ab", "xyz", "Q"]:
        assert hash_key(key, 512) & 255 == hash_key(key, 256)


def test_color_hash_starting_size():
    assert ColorHash(10).size == 256


def test_color_hash_grows_to_power_of_two():
    size = ColorHash(300).size
    assert size >= 300
    assert size & (size - 1) == 0


def test_color_hash_add_and_get():
    table = ColorHash(3)
    table.add("ab", 7)
    table.add("cd", 9)
    assert table.get("ab") == 7
    assert table.get("cd") == 9
    assert table.get("ef") == 0
    assert len(table) == 2


def test_color_hash_later_entry_wins():
    table = ColorHash(2)
    table.add("k", 1)
    table.add("k", 2)
    assert table.get("k") == 2


def test_color_hash_rejects_overflow():
    table = ColorHash(1)
    table.add("a", 1)
    with pytest.raises(XPMError):
        table.add("b", 2)


def test_color_to_rgb_hex_forms():
    assert color_to_rgb("#FFF") == 0xFFFFFF
    assert color_to_rgb("#123456") == 0x123456
    assert color_to_rgb("#FFFF00000000") == 0xFF0000


def test_color_to_rgb_bad_hex_length():
    with pytest.raises(XPMError):
        color_to_rgb("#12")


def test_color_to_rgb_names():
    assert color_to_rgb("red") == 0xFF0000
    assert color_to_rgb("None") == 0xFFFFFFFF
    assert color_to_rgb("aliceblue") is None
    assert color_to_rgb("aliceblue", extended=True) == 0xF0F8FF


def test_read_small_array():
    image = read_xpm_from_array(SMALL)
    assert image.indexed
    assert (image.width, image.height) == (2, 2)
    assert image.pixels == [[0, 1], [1, 0]]
    assert image.palette[0] == 0xFF0000
    assert image.colorkey == 1
    assert image.pixel_rgb(0, 0) == 0xFF0000
    assert image.pixel_rgb(1, 1) == 0xFF0000


def test_symbolic_names_are_skipped():
    image = read_xpm_from_array(["1 1 1 1", "a s border c #00FF00", "a"])
    assert image.pixel_rgb(0, 0) == 0x00FF00
    assert image.colorkey is None


def test_many_colors_not_indexed():
    keys = ["".join(pair) for pair in itertools.product(string.ascii_letters, repeat=2)][:300]
    color_lines = [f"{key} c #{i:06X}" for i, key in enumerate(keys)]
    row = "".join(keys)
    image = read_xpm_from_array([f"300 1 300 2", *color_lines, row])
    assert not image.indexed
    assert image.palette == []
    assert [image.pixel_rgb(x, 0) for x in range(300)] == list(range(300))


def test_pixel_out_of_range():
    image = read_xpm_from_array(SMALL)
    with pytest.raises(IndexError):
        image.pixel_rgb(2, 0)
    with pytest.raises(IndexError):
        image.pixel_rgb(0, -1)


@pytest.mark.parametrize("header", ["x y z w", "0 1 1 1", "1 1 1", "2 2 0 1"])
def test_invalid_header(header):
    with pytest.raises(XPMError, match="Invalid format description"):
        read_xpm_from_array([header, "a c #000000", "a"])


def test_premature_end_of_array():
    with pytest.raises(XPMError, match="Premature end of data"):
        read_xpm_from_array(SMALL[:-1])


def test_unknown_colour_is_parse_error():
    with pytest.raises(XPMError, match="colour parse error"):
        read_xpm_from_array(["1 1 1 1", "a c zzz", "a"])


def test_none_array():
    with pytest.raises(XPMError):
        read_xpm_from_array(None)


def test_is_xpm_keeps_position():
    stream = io.BytesIO(SMALL_FILE)
    assert is_xpm(stream)
    assert stream.tell() == 0
    assert not is_xpm(io.BytesIO(b"GIF89a...."))
    assert not is_xpm(None)


def test_load_stream_matches_array():
    from_stream = load_xpm(io.BytesIO(SMALL_FILE))
    from_array = read_xpm_from_array(SMALL)
    assert from_stream == from_array


def test_truncated_stream_rewinds():
    stream = io.BytesIO(SMALL_FILE[:-6])
    stream.seek(3)
    with pytest.raises(XPMError, match="Premature end of data"):
        load_xpm(stream)
    assert stream.tell() == 3


def test_load_none_stream():
    with pytest.raises(XPMError):
        load_xpm(None)