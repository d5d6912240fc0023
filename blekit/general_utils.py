"""General helpers: base64, hex dumps, ESP error names and string utilities."""

from __future__ import annotations

import base64
import binascii
import logging
import string
from collections.abc import Iterable
from enum import IntEnum

__all__ = [
    "EspError",
    "base64_encode",
    "base64_decode",
    "ends_with",
    "error_to_string",
    "hex_dump",
    "ip_to_string",
    "split",
    "to_lower",
    "trim",
]

_log = logging.getLogger(__name__)

_BASE64_ALPHABET = frozenset(string.ascii_letters + string.digits + "+/")
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_HEX_DUMP_HEADER = (
    "     00 01 02 03 04 05 06 07 08 09 0a 0b 0c 0d 0e 0f  ----------------"
)
_BYTES_PER_LINE = 16


class EspError(IntEnum):
    """ESP error codes that have a readable name."""

    OK = 0
    FAIL = -1
    NO_MEM = 0x101
    INVALID_ARG = 0x102
    INVALID_STATE = 0x103
    INVALID_SIZE = 0x104
    NOT_FOUND = 0x105
    NOT_SUPPORTED = 0x106
    TIMEOUT = 0x107
    NVS_NOT_INITIALIZED = 0x1101
    NVS_NOT_FOUND = 0x1102
    NVS_TYPE_MISMATCH = 0x1103
    NVS_READ_ONLY = 0x1104
    NVS_NOT_ENOUGH_SPACE = 0x1105
    NVS_INVALID_NAME = 0x1106
    NVS_INVALID_HANDLE = 0x1107
    NVS_REMOVE_FAILED = 0x1108
    NVS_KEY_TOO_LONG = 0x1109
    NVS_PAGE_FULL = 0x110A
    NVS_INVALID_STATE = 0x110B
    NVS_INVALID_LENGTH = 0x110C
    WIFI_NOT_INIT = 0x3001
    WIFI_NOT_STARTED = 0x3002
    WIFI_NOT_STOPPED = 0x3003
    WIFI_IF = 0x3004
    WIFI_MODE = 0x3005
    WIFI_STATE = 0x3006
    WIFI_CONN = 0x3007
    WIFI_NVS = 0x3008
    WIFI_MAC = 0x3009
    WIFI_SSID = 0x300A
    WIFI_PASSWORD = 0x300B
    WIFI_TIMEOUT = 0x300C
    WIFI_WAKE_FAIL = 0x300D


_ERROR_TEXT: dict[int, str] = {
    EspError.OK: "OK",
    EspError.FAIL: "Fail",
    EspError.NO_MEM: "No memory",
    EspError.INVALID_ARG: "Invalid argument",
    EspError.INVALID_SIZE: "Invalid state",
    EspError.INVALID_STATE: "Invalid state",
    EspError.NOT_FOUND: "Not found",
    EspError.NOT_SUPPORTED: "Not supported",
    EspError.TIMEOUT: "Timeout",
}
for _code in EspError:
    if _code.name.startswith(("NVS_", "WIFI_")) and _code is not EspError.WIFI_NOT_STARTED:
        if _code is EspError.WIFI_NOT_STOPPED:
            continue
        _ERROR_TEXT[_code] = f"ESP_ERR_{_code.name}"
del _code


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(memoryview(data))


def base64_encode(data: bytes | bytearray | memoryview | str) -> str:
    """Encode data as padded base64 text; text input is taken as UTF-8."""
    return base64.b64encode(_as_bytes(data)).decode("ascii")


def base64_decode(text: str) -> bytes:
    """Decode base64 text, stopping at the first ``=``.

    Padding may be left out.  Raises ValueError when the text holds
    characters outside the alphabet, has an impossible length, or carries
    data after the padding.
    """
    if not text:
        return b""
    body = text.split("=", 1)[0]
    bad = set(body) - _BASE64_ALPHABET
    if bad:
        raise ValueError(f"invalid base64 characters: {''.join(sorted(bad))!r}")
    if len(body) % 4 == 1:
        raise ValueError("invalid base64 length")
    padded = body + "=" * (-len(body) % 4)
    try:
        decoded = base64.b64decode(padded, validate=True)
    except binascii.Error as exc:
        raise ValueError(str(exc)) from exc
    trailing_pads = len(text) - len(text.rstrip("="))
    expected = (6 * len(text)) // 8 - trailing_pads
    if len(decoded) != expected:
        raise ValueError("malformed base64 text")
    return decoded


def ends_with(text: str, char: str) -> bool:
    """Return True when the text ends with the given single character."""
    if len(char) != 1:
        raise ValueError("expected a single character")
    return bool(text) and text[-1] == char


def error_to_string(code: int) -> str:
    """Return a readable name for an ESP error code."""
    return _ERROR_TEXT.get(code, "Unknown ESP_ERR error")


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte <= 0x7E else "."


def hex_dump(data: bytes | bytearray | memoryview | Iterable[int]) -> list[str]:
    """Return a hex and ASCII dump of the data, 16 bytes per line.

    The first line is a column header; each following line starts with the
    offset in hex.  The lines are also sent to the debug log.
    """
    raw = bytes(data)
    lines = [_HEX_DUMP_HEADER]
    for offset in range(0, len(raw), _BYTES_PER_LINE):
        chunk = raw[offset : offset + _BYTES_PER_LINE]
        hex_part = "".join(f"{byte:02x} " for byte in chunk)
        hex_part += "   " * (_BYTES_PER_LINE - len(chunk))
        ascii_part = "".join(_printable(byte) for byte in chunk)
        lines.append(f"{offset:04x} {hex_part} {ascii_part}")
    for line in lines:
        _log.debug("%s", line)
    return lines


def ip_to_string(ip: bytes | bytearray | Iterable[int]) -> str:
    """Format a four byte IPv4 address in dotted decimal."""
    octets = bytes(ip)
    if len(octets) != 4:
        raise ValueError("an IPv4 address has exactly 4 bytes")
    return ".".join(str(octet) for octet in octets)


def split(source: str, delimiter: str) -> list[str]:
    """Split on a single-character delimiter and trim spaces from each part.

    A delimiter at the very end does not produce an empty last part.
    """
    if len(delimiter) != 1:
        raise ValueError("expected a single-character delimiter")
    if not source:
        return []
    parts = source.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return [trim(part) for part in parts]


def to_lower(value: str) -> str:
    """Return the text with ASCII upper-case letters made lower case."""
    return value.translate(_ASCII_LOWER)


def trim(text: str) -> str:
    """Remove leading and trailing spaces.

    Text made only of spaces is returned unchanged.
    """
    stripped = text.strip(" ")
    return stripped if stripped else text