"""
Integer conversions used by the block codec.

Python's int is the arbitrary-precision value type; these helpers only
pin down the byte order, sign and minimal-width conventions.
"""

from typing import Optional


def byte_length(n: int) -> int:
    """Number of bytes needed to hold the bits of n (0 for n == 0)."""
    return (n.bit_length() + 7) // 8


def from_bytes(data: bytes) -> int:
    """Convert bytes to a non-negative integer (big-endian)."""
    return int.from_bytes(data, byteorder='big')


def to_bytes(n: int, length: Optional[int] = None) -> bytes:
    """
    Convert a non-negative integer to bytes (big-endian).

    Without a length the result is minimal: no leading zero bytes, and
    zero becomes b''.
    """
    if length is None:
        length = byte_length(n)
    return n.to_bytes(length, byteorder='big')


def to_decimal(n: int) -> str:
    return str(n)


def from_decimal(text: str) -> int:
    """
    Parse a non-negative decimal integer.

    Raises:
        ValueError: If text is not made of ASCII digits only
    """
    text = text.strip()
    if not text or not text.isascii() or not text.isdigit():
        raise ValueError(f"Not a non-negative decimal integer: {text!r}")
    return int(text)
