"""
RSA Block Codec

Encrypts messages of any length with textbook RSA by splitting them into
blocks that are always numerically smaller than the modulus.

Encryption:
    message bytes -> blocks of (bits(n) - 1) // 8 bytes, split from the left
    each block m_i -> c_i = m_i^key mod n
    each c_i -> big-endian bytes, zero-padded to W = bytes(n) + 1
    concatenation -> one integer -> decimal string

Decryption reverses it. The decimal form drops the leading zero bytes of
the first padded block, so the cipher bytes are split into W-byte chunks
from the right and the leftmost chunk takes whatever is left over.

No randomized padding is used: the same message, key and modulus always
give the same cipher text.
"""

import logging
from typing import List, Optional, Sequence

from ..config import RSAConfig
from .bigint import byte_length, from_bytes, from_decimal, to_bytes, to_decimal
from .report import dump_segments
from .rsa_math import power_mod


logger = logging.getLogger(__name__)

ENCODING = "utf-8"


class CipherFormatError(ValueError):
    """Raised when a cipher string is not a non-negative decimal integer."""
    pass


# ============================================================================
# Block sizes
# ============================================================================

def block_size(modulus: int) -> int:
    """Plaintext bytes per block: one bit less than the modulus, rounded down."""
    return (modulus.bit_length() - 1) // 8


def cipher_width(modulus: int) -> int:
    """Bytes per padded cipher block: the modulus byte length plus one."""
    return byte_length(modulus) + 1


# ============================================================================
# Byte helpers
# ============================================================================

def split_bytes(data: bytes, size: int, from_left: bool = True) -> List[bytes]:
    """
    Split bytes into chunks of at most `size` bytes.

    From the left, every chunk but the last is full. From the right,
    every chunk but the first is full.

    Args:
        data: Bytes to split
        size: Maximum chunk length
        from_left: Which end the full chunks are counted from

    Returns:
        List of chunks in data order, empty if size < 1 or data is empty
    """
    if size < 1 or not data:
        return []

    if from_left:
        return [data[i:i + size] for i in range(0, len(data), size)]

    head = (len(data) - 1) % size + 1
    return [data[:head]] + [data[i:i + size] for i in range(head, len(data), size)]


def pad(data: bytes, length: int) -> bytes:
    """Left-pad with zero bytes up to length; longer input is returned as is."""
    if length <= len(data):
        return data
    return b"\x00" * (length - len(data)) + data


def concat(*chunks: bytes) -> bytes:
    return b"".join(chunks)


def to_byte_arrays(numbers: Sequence[int]) -> List[bytes]:
    """Minimal big-endian bytes of each number."""
    return [to_bytes(n) for n in numbers]


def to_numbers_from_bytes(chunks: Sequence[bytes]) -> List[int]:
    return [from_bytes(chunk) for chunk in chunks]


def to_numbers(message: str, block_bytes: int) -> List[int]:
    """Encode text and turn each block of at most block_bytes into a number."""
    return to_numbers_from_bytes(split_bytes(message.encode(ENCODING), block_bytes))


def concat_numbers(*numbers: int) -> int:
    """Join the minimal byte forms of several numbers into one number."""
    return from_bytes(concat(*to_byte_arrays(numbers)))


# ============================================================================
# Encryption / decryption
# ============================================================================

def encrypt_bytes(data: bytes, key: int, modulus: int,
                  config: Optional[RSAConfig] = None) -> int:
    """
    Encrypt raw bytes into a single cipher integer.

    Args:
        data: Plaintext bytes
        key: Encryption exponent
        modulus: RSA modulus n
        config: Controls the per-block debug dump

    Returns:
        Concatenation of the padded encrypted blocks as one integer
    """
    verbose = config is not None and config.verbose_encryption
    width = cipher_width(modulus)

    blocks = to_numbers_from_bytes(split_bytes(data, block_size(modulus)))
    if verbose:
        dump_segments("Before encryption", blocks, as_text=True)

    encrypted = [power_mod(m, key, modulus) for m in blocks]
    if verbose:
        dump_segments("After encryption", encrypted)
        dump_segments("Padded", encrypted, width=width)

    padded = [pad(chunk, width) for chunk in to_byte_arrays(encrypted)]
    return from_bytes(concat(*padded))


def decrypt_bytes(cipher: int, key: int, modulus: int,
                  config: Optional[RSAConfig] = None) -> bytes:
    """
    Decrypt a cipher integer produced by encrypt_bytes().

    Args:
        cipher: Cipher integer
        key: Decryption exponent
        modulus: RSA modulus n
        config: Controls the per-block debug dump

    Returns:
        Plaintext bytes
    """
    verbose = config is not None and config.verbose_encryption

    chunks = split_bytes(to_bytes(cipher), cipher_width(modulus), from_left=False)
    blocks = to_numbers_from_bytes(chunks)
    if verbose:
        dump_segments("Before decryption", blocks)

    decrypted = [power_mod(c, key, modulus) for c in blocks]
    if verbose:
        dump_segments("After decryption", decrypted, as_text=True)

    return concat(*to_byte_arrays(decrypted))


def encrypt(message: str, key: int, modulus: int,
            config: Optional[RSAConfig] = None) -> str:
    """
    Encrypt a text message into a decimal cipher string.

    Only ASCII text is guaranteed to survive the round trip unchanged.

    Example:
        >>> cipher = encrypt("HI", keys.e, keys.n)
        >>> decrypt(cipher, keys.d, keys.n)
        'HI'
    """
    cipher = encrypt_bytes(message.encode(ENCODING), key, modulus, config)
    logger.debug("Encrypted %d characters with a %d-bit modulus",
                 len(message), modulus.bit_length())
    return to_decimal(cipher)


def decrypt(cipher: str, key: int, modulus: int,
            config: Optional[RSAConfig] = None) -> str:
    """
    Decrypt a decimal cipher string produced by encrypt().

    Raises:
        CipherFormatError: If cipher is not a non-negative decimal integer
    """
    try:
        value = from_decimal(cipher)
    except ValueError as exc:
        raise CipherFormatError(str(exc)) from exc

    data = decrypt_bytes(value, key, modulus, config)
    return data.decode(ENCODING, errors="replace")
