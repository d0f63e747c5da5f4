"""
Debug reporting for key generation and the block codec.

Everything goes through the module logger at INFO level; callers only
invoke these when the matching RSAConfig verbose flag is set.
"""

import logging
from typing import Sequence

from .bigint import byte_length, to_bytes


logger = logging.getLogger(__name__)


def header(title: str, rule: str = "-") -> str:
    """Frame a title between two rules of the same width."""
    line = rule * len(title)
    return f"{line}\n{title}\n{line}"


def format_bytes(data: bytes) -> str:
    """Render bytes as [4A, 01, FF]."""
    return "[" + ", ".join(f"{b:02X}" for b in data) + "]"


def dump_keys(p: int, q: int, n: int, phi: int, e: int, d: int) -> None:
    for name, value in (("p", p), ("q", q), ("n", n), ("φ", phi), ("e", e), ("d", d)):
        logger.info("%s (%d bits) - %d", name, value.bit_length(), value)


def dump_segments(title: str, numbers: Sequence[int], as_text: bool = False,
                  width: int = 0) -> None:
    """
    Log every block of a message.

    Args:
        title: Step name shown in the header
        numbers: Block integers in message order
        as_text: Also show each block decoded as text
        width: Pad each byte dump to this many bytes (0 for minimal)
    """
    logger.info("\n%s", header(title))

    for i, number in enumerate(numbers):
        data = to_bytes(number, max(width, byte_length(number)))
        text = f" '{data.decode('utf-8', errors='replace')}'" if as_text else ""
        logger.info(
            "Segment %d (%d bits):%s\nBytes: %s\nBigInt: %d\n",
            i, number.bit_length(), text, format_bytes(data), number,
        )
