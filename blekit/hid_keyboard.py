"""HID keyboard usage codes for typing characters on US and UK layouts."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum, IntEnum, IntFlag
from functools import cache

__all__ = [
    "REPORT_ID_KEYBOARD",
    "REPORT_ID_VOLUME",
    "KEYMAP_SIZE",
    "ModifierKey",
    "MediaKey",
    "FunctionKey",
    "KeyEntry",
    "Layout",
    "keymap",
    "key_for",
]

REPORT_ID_KEYBOARD = 1
REPORT_ID_VOLUME = 3
KEYMAP_SIZE = 152


class ModifierKey(IntFlag):
    """Modifier bits sent alongside a key usage."""

    CTRL = 1
    SHIFT = 2
    ALT = 4


class MediaKey(IntEnum):
    """Consumer-control media keys."""

    NEXT_TRACK = 0
    PREVIOUS_TRACK = 1
    STOP = 2
    PLAY_PAUSE = 3
    MUTE = 4
    VOLUME_UP = 5
    VOLUME_DOWN = 6


class FunctionKey(IntEnum):
    """Non-character keys, numbered after the ASCII range of the keymap."""

    F1 = 128
    F2 = 129
    F3 = 130
    F4 = 131
    F5 = 132
    F6 = 133
    F7 = 134
    F8 = 135
    F9 = 136
    F10 = 137
    F11 = 138
    F12 = 139
    PRINT_SCREEN = 140
    SCROLL_LOCK = 141
    CAPS_LOCK = 142
    NUM_LOCK = 143
    INSERT = 144
    HOME = 145
    PAGE_UP = 146
    PAGE_DOWN = 147
    RIGHT_ARROW = 148
    LEFT_ARROW = 149
    DOWN_ARROW = 150
    UP_ARROW = 151


@dataclass(frozen=True)
class KeyEntry:
    """A HID usage code and the modifiers needed to produce a key."""

    usage: int
    modifier: ModifierKey = ModifierKey(0)


class Layout(Enum):
    """Keyboard layouts that have a keymap."""

    US = "us"
    UK = "uk"


_NONE = ModifierKey(0)
_SHIFT = ModifierKey.SHIFT

_CONTROL_KEYS = {
    "\b": KeyEntry(0x2A),  # Backspace
    "\t": KeyEntry(0x2B),  # Tab
    "\n": KeyEntry(0x28),  # Return
}

_US_PUNCTUATION = {
    " ": (0x2C, _NONE),
    "!": (0x1E, _SHIFT),
    '"': (0x34, _SHIFT),
    "#": (0x20, _SHIFT),
    "$": (0x21, _SHIFT),
    "%": (0x22, _SHIFT),
    "&": (0x24, _SHIFT),
    "'": (0x34, _NONE),
    "(": (0x26, _SHIFT),
    ")": (0x27, _SHIFT),
    "*": (0x25, _SHIFT),
    "+": (0x2E, _SHIFT),
    ",": (0x36, _NONE),
    "-": (0x2D, _NONE),
    ".": (0x37, _NONE),
    "/": (0x38, _NONE),
    ":": (0x33, _SHIFT),
    ";": (0x33, _NONE),
    "<": (0x36, _SHIFT),
    "=": (0x2E, _NONE),
    ">": (0x37, _SHIFT),
    "?": (0x38, _SHIFT),
    "@": (0x1F, _SHIFT),
    "[": (0x2F, _NONE),
    "\\": (0x31, _NONE),
    "]": (0x30, _NONE),
    "^": (0x23, _SHIFT),
    "_": (0x2D, _SHIFT),
    "`": (0x35, _NONE),
    "{": (0x2F, _SHIFT),
    "|": (0x31, _SHIFT),
    "}": (0x30, _SHIFT),
    "~": (0x35, _SHIFT),
}

_UK_OVERRIDES = {
    '"': (0x1F, _SHIFT),
    "#": (0x32, _NONE),
    "@": (0x34, _SHIFT),
    "\\": (0x64, _NONE),
    "|": (0x64, _SHIFT),
    "~": (0x32, _SHIFT),
}

_FUNCTION_USAGES = {
    FunctionKey.F1: 0x3A,
    FunctionKey.F2: 0x3B,
    FunctionKey.F3: 0x3C,
    FunctionKey.F4: 0x3D,
    FunctionKey.F5: 0x3E,
    FunctionKey.F6: 0x3F,
    FunctionKey.F7: 0x40,
    FunctionKey.F8: 0x41,
    FunctionKey.F9: 0x42,
    FunctionKey.F10: 0x43,
    FunctionKey.F11: 0x44,
    FunctionKey.F12: 0x45,
    FunctionKey.PRINT_SCREEN: 0x46,
    FunctionKey.SCROLL_LOCK: 0x47,
    FunctionKey.CAPS_LOCK: 0x39,
    FunctionKey.NUM_LOCK: 0x53,
    FunctionKey.INSERT: 0x49,
    FunctionKey.HOME: 0x4A,
    FunctionKey.PAGE_UP: 0x4B,
    FunctionKey.PAGE_DOWN: 0x4E,
    FunctionKey.RIGHT_ARROW: 0x4F,
    FunctionKey.LEFT_ARROW: 0x50,
    FunctionKey.DOWN_ARROW: 0x51,
    FunctionKey.UP_ARROW: 0x52,
}


def _character_entries(layout: Layout) -> dict[str, KeyEntry]:
    entries: dict[str, KeyEntry] = dict(_CONTROL_KEYS)
    for lower, upper, usage in zip(
        string.ascii_lowercase, string.ascii_uppercase, range(0x04, 0x1E)
    ):
        entries[lower] = KeyEntry(usage)
        entries[upper] = KeyEntry(usage, _SHIFT)
    for digit, usage in zip("1234567890", range(0x1E, 0x28)):
        entries[digit] = KeyEntry(usage)
    punctuation = dict(_US_PUNCTUATION)
    if layout is Layout.UK:
        punctuation.update(_UK_OVERRIDES)
    for char, (usage, modifier) in punctuation.items():
        entries[char] = KeyEntry(usage, modifier)
    return entries


@cache
def keymap(layout: Layout = Layout.UK) -> tuple[KeyEntry, ...]:
    """Return the full table of 152 entries for a layout.

    Entries 0 to 127 are indexed by ASCII code; entries 128 to 151 by
    :class:`FunctionKey`.  Keys with no usage have a usage of 0.
    """
    layout = Layout(layout)
    characters = _character_entries(layout)
    blank = KeyEntry(0)
    ascii_part = [characters.get(chr(code), blank) for code in range(128)]
    function_part = [KeyEntry(_FUNCTION_USAGES[key]) for key in FunctionKey]
    return tuple(ascii_part + function_part)


def key_for(key: str | int, layout: Layout = Layout.UK) -> KeyEntry:
    """Return the usage and modifiers that produce a character or key.

    ``key`` is a single character, an ASCII code or a :class:`FunctionKey`.
    Raises ValueError for anything outside the keymap and TypeError for
    media keys, which are sent through a different report.
    """
    if isinstance(key, MediaKey):
        raise TypeError("media keys have no keyboard usage")
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError("expected a single character")
        code = ord(key)
    elif isinstance(key, int) and not isinstance(key, bool):
        code = int(key)
    else:
        raise TypeError(f"unsupported key: {key!r}")
    if not 0 <= code < KEYMAP_SIZE:
        raise ValueError(f"key outside the keymap: {key!r}")
    return keymap(layout)[code]