"""
RSA Mathematical Operations

Implements the modular arithmetic used by textbook RSA:
- Extended Euclidean Algorithm (iterative row reduction)
- Modular inverse with a zero sentinel when no inverse exists
- Modular exponentiation (square-and-multiply algorithm)

Note: This implementation avoids using Python's built-in pow(a, b, mod).
      All modular exponentiation uses the square-and-multiply algorithm.
"""

from typing import Tuple


# Returned by modular_inverse() when gcd(value, modulus) != 1
NO_INVERSE = 0


def extended_euclid(a: int, b: int) -> Tuple[int, int, int]:
    """
    Extended Euclidean Algorithm.

    Finds integers x, y such that: a*x + b*y = g

    Works on two rows of the Bezout table, (r0, x0, y0) starting at
    (a, 1, 0) and (r1, x1, y1) starting at (b, 0, 1). Each step subtracts
    the bottom row from the top row q = r0 // r1 times and moves the old
    bottom row up. Every row keeps r = a*x + b*y.

    The loop stops as soon as the bottom remainder is 1 or 0, so g is 1
    when a and b are coprime and 0 otherwise (for b >= 1).

    Args:
        a: First integer
        b: Second integer

    Returns:
        Tuple (g, x, y) where a*x + b*y = g
    """
    r0, x0, y0 = a, 1, 0   # Top row
    r1, x1, y1 = b, 0, 1   # Bottom row

    while r1 > 1:
        q = r0 // r1  # Times to subtract bottom from top
        r0, x0, y0, r1, x1, y1 = (
            r1, x1, y1,
            r0 - q * r1, x0 - q * x1, y0 - q * y1,
        )

    return r1, x1, y1


def modular_inverse(value: int, modulus: int) -> int:
    """
    Compute modular multiplicative inverse using Extended Euclidean Algorithm.

    Finds y such that (value * y) mod modulus = 1

    Args:
        value: The number to find inverse of
        modulus: The modulus

    Returns:
        Modular inverse in [0, modulus), or NO_INVERSE (0) if
        gcd(value, modulus) != 1
    """
    g, _, inverse = extended_euclid(modulus, value)

    if g != 1:
        return NO_INVERSE

    while inverse < 0:
        inverse += modulus

    return inverse


def power_mod(base: int, exponent: int, modulus: int) -> int:
    """
    Modular exponentiation using square-and-multiply algorithm.

    Computes (base^exponent) mod modulus without using
    Python's built-in pow(a, b, mod).

    Algorithm (right-to-left binary method):
    1. Start with result = 1
    2. For each bit of exponent (from LSB to MSB):
       - If bit is 1, multiply result by base (mod modulus)
       - Square the base (mod modulus)

    Time complexity: O(log exponent) multiplications

    Args:
        base: The base number (must be non-negative)
        exponent: The exponent (must be non-negative)
        modulus: The modulus (must be positive)

    Returns:
        (base^exponent) mod modulus

    Raises:
        ValueError: If base < 0, exponent < 0 or modulus <= 0
    """
    if base < 0:
        raise ValueError("Base must be non-negative")
    if exponent < 0:
        raise ValueError("Exponent must be non-negative")
    if modulus <= 0:
        raise ValueError("Modulus must be positive")

    result = 1 % modulus
    squared = base

    while exponent > 0:
        if exponent & 1:
            result = (result * squared) % modulus

        squared = (squared * squared) % modulus
        exponent >>= 1

    return result


def totient(p: int, q: int) -> int:
    """Euler's totient of n = p*q for distinct primes: n - p - q + 1."""
    return p * q - p - q + 1
