import string

import pytest

from blekit.hid_keyboard import (
    KEYMAP_SIZE,
    FunctionKey,
    KeyEntry,
    Layout,
    MediaKey,
    ModifierKey,
    key_for,
    keymap,
)


@pytest.mark.parametrize("layout", list(Layout))
def test_keymap_has_fixed_size(layout):
    assert len(keymap(layout)) == KEYMAP_SIZE == 152


def test_lowercase_a_is_usage_four():
    assert key_for("a", Layout.US) == KeyEntry(0x04, ModifierKey(0))


def test_f1_usage():
    assert key_for(FunctionKey.F1) == KeyEntry(0x3A)


def test_double_quote_differs_between_layouts():
    assert key_for('"', Layout.US) == KeyEntry(0x34, ModifierKey.SHIFT)
    assert key_for('"', Layout.UK) == KeyEntry(0x1F, ModifierKey.SHIFT)


@pytest.mark.parametrize("layout", list(Layout))
def test_uppercase_is_shifted_lowercase(layout):
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        low = key_for(lower, layout)
        up = key_for(upper, layout)
        assert up.usage == low.usage
        assert low.modifier == ModifierKey(0)
        assert up.modifier == ModifierKey.SHIFT


def test_layouts_differ_only_in_six_characters():
    us = keymap(Layout.US)
    uk = keymap(Layout.UK)
    differing = {chr(code) for code, (a, b) in enumerate(zip(us, uk)) if a != b}
    assert differing == {'"', "#", "@", "\\", "|", "~"}


def test_control_characters_without_key_are_blank():
    table = keymap(Layout.UK)
    blanks = [code for code in range(32) if table[code].usage == 0]
    assert set(range(32)) - set(blanks) == {8, 9, 10}


def test_function_keys_index_the_table():
    table = keymap(Layout.US)
    for key in FunctionKey:
        assert key_for(key, Layout.US) is table[key]
        assert table[key].usage != 0


def test_int_and_character_agree():
    assert key_for(ord("z"), Layout.UK) == key_for("z", Layout.UK)


def test_default_layout_is_uk():
    assert key_for("#") == key_for("#", Layout.UK)


def test_multiple_characters_rejected():
    with pytest.raises(ValueError):
        key_for("ab")


def test_out_of_range_code_rejected():
    with pytest.raises(ValueError):
        key_for(KEYMAP_SIZE)


def test_media_key_rejected():
    with pytest.raises(TypeError):
        key_for(MediaKey.MUTE)


def test_layout_from_value():
    assert keymap("us") == keymap(Layout.US)