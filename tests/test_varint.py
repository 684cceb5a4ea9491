import pytest

from embutil import varint


def test_known_encoding():
    assert varint.encode(300) == b"\xac\x02"
    assert varint.decode(b"\xac\x02") == (300, 2)


def test_zero_is_one_byte():
    assert varint.encoded_length(0) == 1
    assert varint.encode(0) == bytes([0])


def test_max_u64_length():
    top = 2**64 - 1
    assert varint.encoded_length(top) == 10
    assert varint.decode(varint.encode(top)) == (top, 10)


@pytest.mark.parametrize(
    "num", [0, 1, 127, 128, 255, 16383, 16384, 2**32 - 1, 2**32, 2**63, 2**64 - 1]
)
def test_round_trip(num):
    encoded = varint.encode(num)
    assert varint.decode(encoded) == (num, len(encoded))
    assert varint.encoded_length(num) == len(encoded)


@pytest.mark.parametrize(
    "num, expected",
    [
        (1, b"\x01"),
        (2**7, b"\x80\x01"),
        (2**14, b"\x80\x80\x01"),
        (2**21, b"\x80\x80\x80\x01"),
        (2**35, b"\x80" * 5 + b"\x01"),
        (2**63, b"\x80" * 9 + b"\x01"),
    ],
)
def test_continuation_bits(num, expected):
    encoded = varint.encode(num)
    assert encoded == expected
    flags = [b & 0x80 for b in encoded]
    assert flags == [0x80] * (len(encoded) - 1) + [0]


@pytest.mark.parametrize("bits", [7, 14, 21, 28, 56])
def test_length_steps_at_seven_bit_boundaries(bits):
    below = 2**bits - 1
    assert varint.encoded_length(2**bits) == varint.encoded_length(below) + 1


def test_decode_ignores_trailing_data():
    encoded = varint.encode(123456)
    value, consumed = varint.decode(encoded + b"\xff\xff")
    assert value == 123456
    assert consumed == len(encoded)


def test_decode_truncated_raises():
    encoded = varint.encode(2**40)
    with pytest.raises(ValueError):
        varint.decode(encoded[:-1])


def test_decode_empty_raises():
    with pytest.raises(ValueError):
        varint.decode(b"")


def test_decode_stops_after_ten_bytes():
    data = b"\x80" * 12
    value, consumed = varint.decode(data)
    assert value == 0
    assert consumed == varint.encoded_length(2**64 - 1)


@pytest.mark.parametrize("num", [-1, 2**64])
def test_out_of_range_rejected(num):
    with pytest.raises(ValueError):
        varint.encode(num)
    with pytest.raises(ValueError):
        varint.encoded_length(num)