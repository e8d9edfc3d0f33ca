"""UTF-8 decoding into codepoints for buffer construction and writes."""

from __future__ import annotations

from typing import Iterator, Union

from curses_chstr.errors import InvalidArgument, InvalidEncoding

TextLike = Union[str, bytes, bytearray, memoryview]

MAX_CODEPOINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


def _sequence_length(lead: int) -> int:
    """Number of bytes in the sequence started by *lead*, or 0 if invalid."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def decode(data: bytes, cursor: int = 0) -> tuple[int, int]:
    """
    Decode one codepoint from *data* starting at *cursor*.

    Args:
        data: UTF-8 encoded bytes
        cursor: Byte offset of the sequence's lead byte

    Returns:
        Tuple of (codepoint, next_cursor)

    Raises:
        InvalidEncoding: bad lead byte, truncated, overlong, surrogate or
            out-of-range sequence
    """
    if not 0 <= cursor < len(data):
        raise InvalidArgument(f"cursor {cursor} outside data of length {len(data)}")

    length = _sequence_length(data[cursor])
    if length == 0:
        raise InvalidEncoding(f"invalid lead byte 0x{data[cursor]:02x}", cursor)

    chunk = bytes(data[cursor:cursor + length])
    if len(chunk) < length:
        raise InvalidEncoding("truncated UTF-8 sequence", cursor)

    try:
        text = chunk.decode("utf-8")
    except UnicodeDecodeError:
        raise InvalidEncoding("bad utf8 byte sequence", cursor) from None
    return ord(text), cursor + length


def iter_codepoints(data: bytes) -> Iterator[int]:
    """Yield codepoints from *data* one sequence at a time."""
    cursor = 0
    while cursor < len(data):
        codepoint, cursor = decode(data, cursor)
        yield codepoint


def decode_all(text: TextLike) -> list[int]:
    """
    Fully decode *text* into a list of codepoints.

    Bytes-like input is decoded as UTF-8; a ``str`` is taken codepoint by
    codepoint. Nothing is returned unless the whole input is valid.
    """
    if isinstance(text, str):
        codepoints = [ord(c) for c in text]
        for i, cp in enumerate(codepoints):
            if cp in SURROGATES:
                raise InvalidEncoding(f"lone surrogate U+{cp:04X}", i, unit="codepoint")
        return codepoints

    if isinstance(text, (bytes, bytearray, memoryview)):
        return list(iter_codepoints(bytes(text)))

    raise InvalidArgument(f"expected str or bytes, got {type(text).__name__}")


def to_codepoint(value: Union[int, TextLike]) -> int:
    """Resolve an int codepoint, or text holding exactly one codepoint."""
    if isinstance(value, bool):
        raise InvalidArgument("character must be an int or a string, got bool")

    if isinstance(value, int):
        if not 0 <= value <= MAX_CODEPOINT or value in SURROGATES:
            raise InvalidArgument(f"not a Unicode scalar value: {value:#x}")
        return value

    codepoints = decode_all(value)
    if len(codepoints) != 1:
        raise InvalidArgument(
            f"character must be exactly one codepoint, got {len(codepoints)}"
        )
    return codepoints[0]
