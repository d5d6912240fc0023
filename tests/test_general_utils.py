import base64

import pytest

from blekit.general_utils import (
    EspError,
    base64_decode,
    base64_encode,
    ends_with,
    error_to_string,
    hex_dump,
    ip_to_string,
    split,
    to_lower,
    trim,
)


@pytest.mark.parametrize(
    "data", [b"", b"f", b"fo", b"foo", b"foob", b"fooba", b"foobar", bytes(range(256))]
)
def test_base64_encode_matches_standard(data):
    assert base64_encode(data) == base64.b64encode(data).decode("ascii")


@pytest.mark.parametrize("data", [b"a", b"ab", b"abc", b"\x00\xff\x10", bytes(range(100))])
def test_base64_round_trip(data):
    assert base64_decode(base64_encode(data)) == data


def test_base64_encode_text_is_utf8():
    assert base64_encode("héllo") == base64_encode("héllo".encode("utf-8"))


def test_base64_decode_without_padding():
    encoded = base64_encode(b"xy")
    assert base64_decode(encoded.rstrip("=")) == b"xy"


def test_base64_decode_empty():
    assert base64_decode("") == b""


def test_base64_decode_invalid_character():
    with pytest.raises(ValueError):
        base64_decode("ab!d")


def test_base64_decode_impossible_length():
    with pytest.raises(ValueError):
        base64_decode("abcde")


def test_base64_decode_data_after_padding():
    with pytest.raises(ValueError):
        base64_decode(base64_encode(b"a") + "QUJD")


def test_ends_with():
    assert ends_with("path/", "/") is True
    assert ends_with("path", "/") is False
    assert ends_with("", "/") is False


def test_ends_with_rejects_long_suffix():
    with pytest.raises(ValueError):
        ends_with("abc", "bc")


def test_error_to_string_known_codes():
    assert error_to_string(EspError.OK) == "OK"
    assert error_to_string(EspError.FAIL) == "Fail"
    assert error_to_string(EspError.NO_MEM) == "No memory"
    assert error_to_string(EspError.NVS_NOT_FOUND) == "ESP_ERR_NVS_NOT_FOUND"
    assert error_to_string(EspError.WIFI_WAKE_FAIL) == "ESP_ERR_WIFI_WAKE_FAIL"


def test_error_to_string_invalid_size_reads_as_state():
    assert error_to_string(EspError.INVALID_SIZE) == error_to_string(EspError.INVALID_STATE)
    assert error_to_string(EspError.INVALID_SIZE) == "Invalid state"


def test_error_to_string_accepts_plain_int():
    assert error_to_string(int(EspError.TIMEOUT)) == "Timeout"


def test_error_to_string_unknown():
    assert error_to_string(12345678) == "Unknown ESP_ERR error"
    assert error_to_string(EspError.WIFI_NOT_STARTED) == "Unknown ESP_ERR error"


def test_hex_dump_header_and_line_count():
    lines = hex_dump(bytes(range(40)))
    assert lines[0] == "     00 01 02 03 04 05 06 07 08 09 0a 0b 0c 0d 0e 0f  ----------------"
    assert len(lines) == 4


def test_hex_dump_lines_are_equal_width_up_to_ascii():
    lines = hex_dump(b"A" * 20)
    full, partial = lines[1], lines[2]
    assert full.startswith("0000 ")
    assert partial.startswith("0010 ")
    assert full.index("A" * 16) == partial.index("AAAA")
    assert full.endswith("A" * 16)


def test_hex_dump_replaces_unprintable():
    lines = hex_dump(b"Hi\x00\x7f")
    assert lines[1].endswith(" Hi..")
    assert "48 69 00 7f " in lines[1]


def test_hex_dump_empty():
    assert len(hex_dump(b"")) == 1


def test_ip_to_string():
    assert ip_to_string(bytes([192, 168, 1, 10])) == "192.168.1.10"
    assert ip_to_string([0, 0, 0, 0]) == "0.0.0.0"


def test_ip_to_string_wrong_length():
    with pytest.raises(ValueError):
        ip_to_string([1, 2, 3])


def test_split_trims_parts():
    assert split(" a , b ,c", ",") == ["a", "b", "c"]


def test_split_trailing_delimiter_and_empty_parts():
    assert split("a,,b,", ",") == ["a", "", "b"]
    assert split(",a", ",") == ["", "a"]
    assert split("", ",") == []


def test_split_without_delimiter():
    assert split("whole", ";") == ["whole"]


def test_to_lower():
    assert to_lower("HeLLo World 42") == "hello world 42"
    assert to_lower("ÄB") == "Äb"


def test_trim():
    assert trim("  abc  ") == "abc"
    assert trim("\tabc ") == "\tabc"
    assert trim("") == ""


def test_trim_only_spaces_unchanged():
    assert trim("   ") == "   "