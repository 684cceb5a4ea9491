"""Unsigned LEB128 varints, as used for 64-bit lengths and offsets."""

from __future__ import annotations

_MAX_U64 = (1 << 64) - 1


def _check(num: int) -> None:
    if not 0 <= num <= _MAX_U64:
        raise ValueError(f"{num} does not fit in an unsigned 64-bit integer")


def encoded_length(num: int) -> int:
    """Number of bytes needed to encode ``num``."""
    _check(num)
    length = 1
    while num >> 7:
        num >>= 7
        length += 1
    return length


def encode(num: int) -> bytes:
    """Encode ``num``: 7 bits per byte, little end first, MSB means 'more'."""
    _check(num)
    out = bytearray()
    while True:
        byte = num & 0x7F
        num >>= 7
        if num:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def decode(buf: bytes | bytearray | memoryview) -> tuple[int, int]:
    """Decode a varint from the start of ``buf``.

    Returns ``(value, bytes_consumed)``. Raises ValueError if ``buf`` ends
    before the varint does.
    """
    data = bytes(buf)
    value = 0
    shift = 0
    consumed = 0
    while True:
        if consumed == len(data):
            raise ValueError("buffer ends before the varint is complete")
        byte = data[consumed]
        value |= (byte & 0x7F) << shift
        consumed += 1
        shift += 7
        if shift >= 64 or not byte & 0x80:
            break
    return value & _MAX_U64, consumed