"""Bluetooth LE UUIDs in their 16, 32 and 128 bit forms."""

from __future__ import annotations

import re

__all__ = ["BLEUUID"]

# The Bluetooth base UUID 00000000-0000-1000-8000-00805f9b34fb without its
# variable 32-bit prefix.
_BASE_SUFFIX = 0x0000_1000_8000_00805F9B34FB
_BASE_STRING_SUFFIX = "-0000-1000-8000-00805f9b34fb"

_UUID_128_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


class BLEUUID:
    """A BLE UUID that may be unset, or hold a 16, 32 or 128 bit value.

    Instances are immutable.  An unset UUID compares unequal to everything,
    itself included.
    """

    __slots__ = ("_bits", "_value")

    def __init__(self) -> None:
        self._bits = 0
        self._value = 0

    @classmethod
    def _make(cls, bits: int, value: int) -> BLEUUID:
        uuid = cls()
        uuid._bits = bits
        uuid._value = value
        return uuid

    @classmethod
    def from_data(cls, value: bytes | bytearray | memoryview | str) -> BLEUUID:
        """Build a UUID from raw bytes or from a 36 character hex string.

        Two or four bytes give a 16 or 32 bit UUID in little-endian order;
        sixteen bytes give a 128 bit UUID with the most significant byte
        first.  A 36 character string is read as the usual dashed hex form.
        """
        if isinstance(value, str):
            if len(value) != 36:
                raise ValueError("UUID text must be 36 characters long")
            return cls._parse_128(value)
        data = bytes(memoryview(value))
        if len(data) == 2:
            return cls._make(16, int.from_bytes(data, "little"))
        if len(data) == 4:
            return cls._make(32, int.from_bytes(data, "little"))
        if len(data) == 16:
            return cls._make(128, int.from_bytes(data, "big"))
        if len(data) == 36:
            return cls._parse_128(data.decode("ascii", errors="replace"))
        raise ValueError("UUID value not 2, 4, 16 or 36 bytes")

    @classmethod
    def _parse_128(cls, text: str) -> BLEUUID:
        if not _UUID_128_PATTERN.fullmatch(text):
            raise ValueError(f"malformed UUID text: {text!r}")
        return cls._make(128, int(text.replace("-", ""), 16))

    @classmethod
    def from_bytes(
        cls, data: bytes | bytearray | memoryview, msb_first: bool
    ) -> BLEUUID:
        """Build a 128 bit UUID from exactly 16 bytes."""
        raw = bytes(memoryview(data))
        if len(raw) != 16:
            raise ValueError("UUID length not 16 bytes")
        return cls._make(128, int.from_bytes(raw, "big" if msb_first else "little"))

    @classmethod
    def from_uuid16(cls, value: int) -> BLEUUID:
        """Build a 16 bit short-form UUID."""
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"16-bit UUID out of range: {value}")
        return cls._make(16, value)

    @classmethod
    def from_uuid32(cls, value: int) -> BLEUUID:
        """Build a 32 bit short-form UUID."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"32-bit UUID out of range: {value}")
        return cls._make(32, value)

    @classmethod
    def from_string(cls, text: str) -> BLEUUID:
        """Build a UUID from ``NNNN``, ``NNNNNNNN`` or the dashed 128 bit form.

        Each form may carry a leading ``0x``.  Text of any other length gives
        an unset UUID.
        """
        body = text[2:] if text.startswith("0x") else text
        if len(body) == 4:
            return cls.from_uuid16(int(body, 16))
        if len(body) == 8:
            return cls.from_uuid32(int(body, 16))
        if len(body) == 36:
            return cls.from_data(body)
        return cls()

    def bit_size(self) -> int:
        """Return 16, 32 or 128, or 0 when no value is set."""
        return self._bits

    def is_set(self) -> bool:
        """Return True when the UUID holds a value."""
        return self._bits != 0

    def to128(self) -> BLEUUID:
        """Return the full 128 bit form of this UUID."""
        if self._bits in (0, 128):
            return self
        return self._make(128, (self._value << 96) | _BASE_SUFFIX)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BLEUUID):
            return NotImplemented
        if not self.is_set() or not other.is_set():
            return False
        if self._bits != other._bits:
            return str(self) == str(other)
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(str(self))

    def __str__(self) -> str:
        if self._bits == 0:
            return "<NULL>"
        if self._bits == 16:
            return f"0000{self._value:04x}{_BASE_STRING_SUFFIX}"
        if self._bits == 32:
            return f"{self._value:08x}{_BASE_STRING_SUFFIX}"
        digits = f"{self._value:032x}"
        return "-".join(
            (digits[:8], digits[8:12], digits[12:16], digits[16:20], digits[20:])
        )

    def __repr__(self) -> str:
        return f"BLEUUID({str(self)!r}, bits={self._bits})"