import sys

import pytest

from teapacket.endian import (
    is_big_endian,
    swap_endian,
    swap_endian16,
    swap_endian32,
    swap_endian64,
)


def test_is_big_endian_matches_native_layout():
    first_byte = (1).to_bytes(2, sys.byteorder)[0]
    assert first_byte == (0 if is_big_endian() else 1)


def test_swap16_value():
    assert swap_endian16(0x1234) == 0x3412


def test_swap32_value():
    assert swap_endian32(0x12345678) == 0x78563412


def test_swap64_reverses_bytes():
    raw = bytes(range(1, 9))
    value = int.from_bytes(raw, "big")
    assert swap_endian64(value) == int.from_bytes(raw, "little")


@pytest.mark.parametrize(
    "func,value",
    [
        (swap_endian16, 0xABCD),
        (swap_endian32, 0xDEADBEEF),
        (swap_endian64, 0x0123456789ABCDEF),
        (swap_endian16, 0),
        (swap_endian64, 2**64 - 1),
    ],
)
def test_swap_is_involution(func, value):
    assert func(func(value)) == value


def test_signed_swap_value():
    assert swap_endian(-2, 16, True) == -257


@pytest.mark.parametrize("bits", [16, 32, 64])
@pytest.mark.parametrize("value", [-1, -12345, 0, 1, 100])
def test_signed_swap_round_trip(bits, value):
    assert swap_endian(swap_endian(value, bits, True), bits, True) == value


def test_unsupported_width():
    with pytest.raises(ValueError):
        swap_endian(1, 24, False)


def test_out_of_range_unsigned():
    with pytest.raises(OverflowError):
        swap_endian16(0x10000)


def test_negative_unsigned_rejected():
    with pytest.raises(OverflowError):
        swap_endian32(-1)