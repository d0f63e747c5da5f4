"""
Probable Prime Generation

Miller-Rabin primality testing and random prime generation at an exact
bit length. All randomness comes from a cryptographically secure source
(secrets.SystemRandom by default); callers may pass any random.Random
compatible instance, which the tests use to make draws reproducible.
"""

import random
import secrets
from typing import Optional

from .rsa_math import power_mod


DEFAULT_ROUNDS = 40
SMALL_PRIMES = [3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]


def secure_random() -> random.Random:
    """Return a random.Random backed by os.urandom."""
    return secrets.SystemRandom()


def is_probable_prime(n: int, k: int = DEFAULT_ROUNDS,
                      rng: Optional[random.Random] = None) -> bool:
    """
    Miller-Rabin primality test.

    A probabilistic test that determines if n is probably prime.
    Probability of false positive: at most (1/4)^k

    Algorithm:
    1. Write n-1 as 2^r * d (factor out powers of 2)
    2. For k random witnesses a:
       - Compute x = a^d mod n
       - If x = 1 or x = n-1, continue
       - Square x up to r-1 times, looking for n-1
       - If never found, n is composite

    Args:
        n: Number to test for primality
        k: Number of rounds (witnesses to test)
        rng: Random source for witnesses

    Returns:
        True if n is probably prime, False if definitely composite
    """
    if n < 2:
        return False
    if n == 2 or n == 3:
        return True
    if n % 2 == 0:
        return False

    for p in SMALL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False

    rng = rng or secure_random()

    r, d = 0, n - 1
    while d % 2 == 0:
        r += 1
        d //= 2

    for _ in range(k):
        # Witness in [2, n-2]
        a = rng.randrange(2, n - 1)
        x = power_mod(a, d, n)

        if x == 1 or x == n - 1:
            continue

        composite = True
        for _ in range(r - 1):
            x = power_mod(x, 2, n)
            if x == n - 1:
                composite = False
                break

        if composite:
            return False

    return True


def generate_prime(bits: int, rng: Optional[random.Random] = None,
                   k: int = DEFAULT_ROUNDS) -> int:
    """
    Generate a random probable prime with exactly `bits` bits.

    Args:
        bits: Desired bit length of the prime
        rng: Random source (secure by default)
        k: Number of Miller-Rabin rounds

    Returns:
        A prime p with p.bit_length() == bits

    Raises:
        ValueError: If bits < 2
    """
    if bits < 2:
        raise ValueError("Bit length must be at least 2")

    rng = rng or secure_random()

    if bits == 2:
        return rng.choice([2, 3])

    while True:
        # MSB keeps the bit length, LSB makes it odd
        candidate = rng.getrandbits(bits)
        candidate |= (1 << (bits - 1))
        candidate |= 1

        if is_probable_prime(candidate, k, rng):
            return candidate
