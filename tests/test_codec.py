"""Tests for UTF-8 decoding."""

import pytest

from curses_chstr.codec.utf8 import decode, decode_all, iter_codepoints, to_codepoint
from curses_chstr.errors import InvalidArgument, InvalidEncoding


class TestDecode:
    """Tests for single sequence decoding."""

    @pytest.mark.parametrize("char", ["A", "é", "世", "😀"])
    def test_one_codepoint(self, char: str) -> None:
        data = char.encode("utf-8")
        assert decode(data) == (ord(char), len(data))

    def test_cursor(self) -> None:
        data = "a世b".encode("utf-8")
        assert decode(data, 1) == (ord("世"), 4)
        assert decode(data, 4) == (ord("b"), 5)

    @pytest.mark.parametrize(
        "data, position",
        [
            (b"\x80", 0),          # continuation byte as lead
            (b"a\xff", 1),         # never valid
            (b"\xe4\xb8", 0),      # truncated
            (b"\xe0\x80\x80", 0),  # overlong
            (b"\xed\xa0\x80", 0),  # surrogate
            (b"\xf4\x90\x80\x80", 0),  # above U+10FFFF
        ],
    )
    def test_invalid(self, data: bytes, position: int) -> None:
        cursor = position
        with pytest.raises(InvalidEncoding) as info:
            decode(data, cursor)
        assert info.value.position == position

    def test_cursor_out_of_range(self) -> None:
        with pytest.raises(InvalidArgument):
            decode(b"abc", 3)

    def test_iter_codepoints(self) -> None:
        assert list(iter_codepoints("hi,世界".encode("utf-8"))) == [
            ord(c) for c in "hi,世界"
        ]


class TestDecodeAll:
    """Tests for whole-string decoding."""

    def test_bytes_and_str_agree(self) -> None:
        text = "añ✓😀"
        assert decode_all(text) == decode_all(text.encode("utf-8"))
        assert decode_all(bytearray(text.encode("utf-8"))) == [ord(c) for c in text]

    def test_error_position(self) -> None:
        with pytest.raises(InvalidEncoding) as info:
            decode_all(b"abc\xffdef")
        assert info.value.position == 3

    def test_lone_surrogate_in_str(self) -> None:
        with pytest.raises(InvalidEncoding, match="at codepoint 1") as info:
            decode_all("a\ud800")
        assert info.value.position == 1

    def test_bytes_error_names_byte(self) -> None:
        with pytest.raises(InvalidEncoding, match="at byte 2"):
            decode_all(b"ok\xfe")

    def test_matches_single_step_decoder(self) -> None:
        data = "hi,世界😀".encode("utf-8")
        assert decode_all(data) == list(iter_codepoints(data))

    def test_empty(self) -> None:
        assert decode_all(b"") == []

    @pytest.mark.parametrize("value", [None, 42, ["a"]])
    def test_bad_type(self, value) -> None:
        with pytest.raises(InvalidArgument):
            decode_all(value)


class TestToCodepoint:
    """Tests for resolving set_ch input."""

    def test_int(self) -> None:
        assert to_codepoint(65) == 65

    def test_text(self) -> None:
        assert to_codepoint("风") == ord("风")
        assert to_codepoint("风".encode("utf-8")) == ord("风")

    @pytest.mark.parametrize("value", ["ab", "", b"", True, 0x110000, 0xDFFF])
    def test_invalid(self, value) -> None:
        with pytest.raises(InvalidArgument):
            to_codepoint(value)
