"""Byte-order helpers."""

import sys

_SUPPORTED_BITS = (16, 32, 64)


def is_big_endian():
    """Return whether the host stores integers big-endian."""
    return sys.byteorder == "big"


def swap_endian(value, bits, signed):
    """Reverse the byte order of an integer of the given width."""
    if bits not in _SUPPORTED_BITS:
        raise ValueError(f"unsupported integer width: {bits}")
    size = bits // 8
    try:
        raw = value.to_bytes(size, "little", signed=signed)
    except OverflowError as exc:
        kind = "signed" if signed else "unsigned"
        raise OverflowError(f"{value} does not fit in a {kind} {bits}-bit integer") from exc
    return int.from_bytes(raw, "big", signed=signed)


def swap_endian16(value):
    """Reverse the bytes of an unsigned 16-bit integer."""
    return swap_endian(value, 16, False)


def swap_endian32(value):
    """Reverse the bytes of an unsigned 32-bit integer."""
    return swap_endian(value, 32, False)


def swap_endian64(value):
    """Reverse the bytes of an unsigned 64-bit integer."""
    return swap_endian(value, 64, False)