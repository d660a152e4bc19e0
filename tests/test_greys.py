import pytest

from eventzgame.greys import grey_level, grey_levels


def test_pinned_values_from_table():
    assert grey_level("gray50") == 0x7F7F7F
    assert grey_level("grey1") == 0x030303
    assert grey_level("gray100") == 0xFFFFFF
    assert grey_level("grey0") == 0x000000


def test_names_cover_both_spellings_and_all_levels():
    expected = {f"{s}{i}" for s in ("gray", "grey") for i in range(101)}
    assert set(grey_levels()) == expected


def test_order_is_lexical():
    names = list(grey_levels())
    assert names == sorted(names)
    assert names[:4] == ["gray0", "gray1", "gray10", "gray100"]


def test_spellings_agree():
    levels = grey_levels()
    for i in range(101):
        assert levels[f"gray{i}"] == levels[f"grey{i}"]


def test_channels_are_equal():
    for value in grey_levels().values():
        r, g, b = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
        assert r == g == b
        assert 0 <= value <= 0xFFFFFF


def test_levels_strictly_increase():
    values = [grey_level(f"gray{i}") for i in range(101)]
    assert all(a < b for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("name", ["GRAY50", "Grey50", " gray50 "])
def test_lookup_ignores_case_and_padding(name):
    assert grey_level(name) == grey_level("gray50")


@pytest.mark.parametrize("name", ["gray101", "gray", "grey-1", "silver", ""])
def test_unknown_names_raise(name):
    with pytest.raises(KeyError):
        grey_level(name)


def test_returned_mapping_is_a_copy():
    levels = grey_levels()
    levels["gray50"] = 0
    assert grey_level("gray50") == 0x7F7F7F
    assert grey_levels()["gray50"] == 0x7F7F7F