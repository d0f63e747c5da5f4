"""
RSA Key Generation

Generates textbook RSA keys from two random probable primes whose bit
lengths are jittered independently around a target:

    n = p * q
    φ = n - p - q + 1
    e = random probable prime with fewer bits than φ
    d = e^(-1) mod φ

The keypair is returned as (e, d, n). Textbook RSA is symmetric, so
either exponent can encrypt as long as the other one decrypts.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import RSAConfig
from . import primes
from .rsa_math import NO_INVERSE, modular_inverse, totient
from .report import dump_keys


logger = logging.getLogger(__name__)

MIN_BIT_LENGTH = 8      # block splitting needs at least one byte per block
MIN_PRIME_BITS = 5      # keeps n above 2^8 whatever the jitter
MIN_EXPONENT_BITS = 16  # used once φ has more than 20 bits
SMALL_TOTIENT_BITS = 20


@dataclass(frozen=True)
class Keypair:
    """
    Textbook RSA keypair.

    e encrypts, d decrypts and n is the modulus. d is 0 when no inverse
    of e existed and the generator was told not to retry.
    """
    e: int
    d: int
    n: int

    @property
    def public_key(self) -> Tuple[int, int]:
        """Encryption key (e, n)."""
        return self.e, self.n

    @property
    def private_key(self) -> Tuple[int, int]:
        """Decryption key (d, n)."""
        return self.d, self.n

    @property
    def key_size(self) -> int:
        """Modulus size in bits."""
        return self.n.bit_length()

    @property
    def has_inverse(self) -> bool:
        return self.d != NO_INVERSE

    def swapped(self) -> 'Keypair':
        """Same keypair with the roles of e and d exchanged."""
        return Keypair(e=self.d, d=self.e, n=self.n)

    def __repr__(self) -> str:
        return f"Keypair(bits={self.key_size}, e={self.e})"


def _jitter(variance: int, rng: random.Random) -> int:
    if variance <= 0:
        return 0
    return rng.randint(-variance, variance)


def generate_primes(bit_length: int, variance: int,
                    rng: Optional[random.Random] = None) -> Tuple[int, int]:
    """
    Generate two distinct probable primes around bit_length.

    Each prime gets its own offset drawn uniformly from
    [-variance, variance]. If both draws land on the same prime the whole
    draw is repeated.

    Args:
        bit_length: Target bit length of each prime
        variance: Maximum offset from the target, 0 for exact lengths
        rng: Random source (secure by default)

    Returns:
        Tuple (p, q) with p != q
    """
    rng = rng or primes.secure_random()

    while True:
        p_bits = max(bit_length + _jitter(variance, rng), MIN_PRIME_BITS)
        q_bits = max(bit_length + _jitter(variance, rng), MIN_PRIME_BITS)

        p = primes.generate_prime(p_bits, rng)
        q = primes.generate_prime(q_bits, rng)

        if p != q:
            return p, q

        logger.debug("Drew the same %d-bit prime twice, retrying", p_bits)


def _exponent_bits(phi: int, rng: random.Random) -> int:
    phi_bits = phi.bit_length()
    minimum = MIN_EXPONENT_BITS if phi_bits > SMALL_TOTIENT_BITS else 0
    # A prime has at least 2 bits
    return max(rng.randrange(minimum, phi_bits), 2)


def derive_keypair(p: int, q: int, rng: Optional[random.Random] = None,
                   config: Optional[RSAConfig] = None) -> Keypair:
    """
    Derive (e, d, n) from two distinct primes.

    e is a random probable prime with fewer bits than φ, so e < φ. When
    e happens to divide φ there is no inverse; by default a new e is
    drawn, otherwise d is left as the 0 sentinel.

    Args:
        p: First prime
        q: Second prime, different from p
        rng: Random source (secure by default)
        config: Verbosity and missing-inverse policy

    Returns:
        Keypair(e, d, n)
    """
    rng = rng or primes.secure_random()
    config = config or RSAConfig()

    n = p * q
    phi = totient(p, q)

    while True:
        e = primes.generate_prime(_exponent_bits(phi, rng), rng)
        d = modular_inverse(e, phi)

        if d != NO_INVERSE:
            break
        if not config.retry_missing_inverse:
            logger.warning(
                "e = %d has no inverse mod φ; keeping d = 0, decryption will fail", e
            )
            break

        logger.debug("e = %d has no inverse mod φ, drawing another exponent", e)

    if config.verbose_numbers:
        dump_keys(p, q, n, phi, e, d)

    return Keypair(e=e, d=d, n=n)


def generate_keys(bit_length: int, variance: int,
                  rng: Optional[random.Random] = None,
                  config: Optional[RSAConfig] = None) -> Keypair:
    """
    Generate a textbook RSA keypair.

    Args:
        bit_length: Bit length of each prime before jitter (at least 8)
        variance: Range above or below bit_length each prime may have
        rng: Random source (secure by default)
        config: Verbosity and missing-inverse policy

    Returns:
        Keypair(e, d, n)

    Example:
        >>> keys = generate_keys(64, 0)
        >>> keys.e * keys.d > 1
        True
    """
    if bit_length < MIN_BIT_LENGTH:
        logger.warning(
            "Minimum bit-length of %d required, setting bit-length to %d",
            MIN_BIT_LENGTH, MIN_BIT_LENGTH,
        )
        bit_length = MIN_BIT_LENGTH

    rng = rng or primes.secure_random()

    p, q = generate_primes(bit_length, variance, rng)
    return derive_keypair(p, q, rng, config)
