"""
Unit tests for Core Crypto modules.

Tests:
- Extended Euclid and modular inverse
- Square-and-multiply exponentiation
- Miller-Rabin and prime generation
- Integer conversions
"""

import random

import pytest
from textrsa.core_crypto.rsa_math import (
    NO_INVERSE, extended_euclid, modular_inverse, power_mod, totient
)
from textrsa.core_crypto.primes import generate_prime, is_probable_prime
from textrsa.core_crypto.bigint import (
    byte_length, from_bytes, from_decimal, to_bytes, to_decimal
)


def naive_power_mod(base, exponent, modulus):
    result = 1 % modulus
    for _ in range(exponent):
        result = (result * base) % modulus
    return result


class TestExtendedEuclid:
    """Unit tests for the extended Euclidean algorithm."""

    def test_known_coefficients(self):
        """Rows reduce 60, 7 down to (1, 2, -17)."""
        assert extended_euclid(60, 7) == (1, 2, -17)

    def test_bezout_identity_for_coprime_pairs(self):
        """g == b*x + a*y for coprime inputs."""
        pairs = [(3, 10), (7, 60), (17, 43), (65537, 3120), (101, 1000)]
        for a, b in pairs:
            g, x, y = extended_euclid(b, a)
            assert g == 1, f"({b}, {a}) should be coprime"
            assert b * x + a * y == g

    def test_second_argument_one(self):
        """Loop never runs when the bottom remainder starts at 1."""
        assert extended_euclid(10, 1) == (1, 0, 1)

    def test_not_coprime_gives_zero(self):
        """Common factors end the reduction on a remainder of 0."""
        g, _, _ = extended_euclid(4, 2)
        assert g == 0
        g, _, _ = extended_euclid(60, 5)
        assert g == 0

    def test_identity_holds_when_not_coprime(self):
        """Every row keeps r = a*x + b*y, even the zero row."""
        for a, b in [(48, 18), (60, 5), (100, 75)]:
            g, x, y = extended_euclid(a, b)
            assert a * x + b * y == g


class TestModularInverse:
    """Unit tests for modular inverse."""

    def test_classic_example(self):
        # 3 * 7 ≡ 1 (mod 10)
        assert modular_inverse(3, 10) == 7

    def test_negative_coefficient_is_normalized(self):
        """y = -17 becomes 43 mod 60."""
        assert modular_inverse(7, 60) == 43

    def test_inverse_property(self):
        for a, m in [(17, 43), (65537, 3120), (2, 9), (12345, 1000003)]:
            inv = modular_inverse(a, m)
            assert 0 <= inv < m
            assert (a * inv) % m == 1

    def test_one_is_its_own_inverse(self):
        assert modular_inverse(1, 97) == 1

    def test_no_inverse_returns_sentinel(self):
        assert modular_inverse(5, 60) == NO_INVERSE
        assert modular_inverse(6, 9) == NO_INVERSE

    def test_zero_has_no_inverse(self):
        assert modular_inverse(0, 11) == NO_INVERSE


class TestPowerMod:
    """Unit tests for square-and-multiply exponentiation."""

    @pytest.mark.parametrize("base,exponent,modulus,expected", [
        (2, 10, 1000, 24),      # 1024 mod 1000
        (3, 7, 13, 3),          # 2187 mod 13
        (5, 117, 19, 1),        # Fermat: 5^18 ≡ 1 (mod 19)
        (7, 0, 13, 1),
        (0, 5, 13, 0),
    ])
    def test_known_values(self, base, exponent, modulus, expected):
        assert power_mod(base, exponent, modulus) == expected

    def test_matches_naive_reference(self):
        """Agrees with repeated multiplication for small exponents."""
        for modulus in (2, 3, 10, 97, 256, 3233):
            for base in (0, 1, 2, 5, 123, 4000):
                for exponent in range(0, 40):
                    assert power_mod(base, exponent, modulus) == \
                        naive_power_mod(base, exponent, modulus)

    def test_fermat_little_theorem(self):
        p = 1000003
        assert power_mod(2, p - 1, p) == 1

    def test_base_larger_than_modulus(self):
        assert power_mod(1000, 3, 7) == naive_power_mod(1000, 3, 7)

    def test_modulus_one(self):
        assert power_mod(5, 0, 1) == 0
        assert power_mod(5, 3, 1) == 0

    def test_negative_exponent_rejected(self):
        with pytest.raises(ValueError):
            power_mod(2, -1, 7)

    def test_negative_base_rejected(self):
        with pytest.raises(ValueError):
            power_mod(-2, 3, 7)

    def test_non_positive_modulus_rejected(self):
        with pytest.raises(ValueError):
            power_mod(2, 3, 0)


class TestTotient:
    def test_two_primes(self):
        assert totient(61, 53) == 60 * 52
        assert totient(7, 11) == 60


class TestPrimes:
    """Unit tests for Miller-Rabin and prime generation."""

    def test_miller_rabin_primes(self):
        primes = [2, 3, 5, 7, 11, 13, 17, 19, 23, 53, 61, 97, 101, 104729,
                  2147483647, 2305843009213693951]
        for p in primes:
            assert is_probable_prime(p), f"{p} should be prime"

    def test_miller_rabin_composites(self):
        composites = [0, 1, 4, 6, 8, 9, 10, 12, 15, 21, 100, 3233, 104730,
                      561, 41041]  # includes Carmichael numbers
        for c in composites:
            assert not is_probable_prime(c), f"{c} should not be prime"

    @pytest.mark.parametrize("bits", [2, 3, 5, 8, 16, 64, 128])
    def test_generated_prime_has_exact_bit_length(self, bits):
        p = generate_prime(bits)
        assert p.bit_length() == bits
        assert is_probable_prime(p)

    def test_seeded_source_is_reproducible(self):
        assert generate_prime(64, random.Random(7)) == generate_prime(64, random.Random(7))

    def test_bit_length_too_small(self):
        with pytest.raises(ValueError):
            generate_prime(1)


class TestBigInt:
    """Byte and decimal conversions."""

    def test_minimal_bytes(self):
        assert to_bytes(0x4849) == b"HI"
        assert to_bytes(1) == b"\x01"

    def test_zero_is_empty(self):
        assert to_bytes(0) == b""
        assert byte_length(0) == 0

    def test_fixed_width(self):
        assert to_bytes(1, 3) == b"\x00\x00\x01"

    def test_from_bytes_ignores_leading_zeros(self):
        assert from_bytes(b"\x00\x00HI") == from_bytes(b"HI")

    def test_byte_length(self):
        assert byte_length(255) == 1
        assert byte_length(256) == 2

    def test_decimal(self):
        assert to_decimal(12345678901234567890) == "12345678901234567890"
        assert from_decimal(" 42\n") == 42

    @pytest.mark.parametrize("text", ["", "-5", "12a", "1.5", "٣"])
    def test_bad_decimal(self, text):
        with pytest.raises(ValueError):
            from_decimal(text)
