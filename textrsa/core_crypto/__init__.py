# Core Cryptography Module
"""
Textbook RSA building blocks:
- Extended Euclid, modular inverse and square-and-multiply exponentiation
- Miller-Rabin probable primes
- Key generation
- Block encryption of arbitrary-length messages
"""

from .rsa_math import NO_INVERSE, extended_euclid, modular_inverse, power_mod
from .primes import generate_prime, is_probable_prime
from .keygen import Keypair, derive_keypair, generate_keys, generate_primes
from .block_codec import CipherFormatError, decrypt, decrypt_bytes, encrypt, encrypt_bytes

__all__ = [
    'NO_INVERSE',
    'extended_euclid',
    'modular_inverse',
    'power_mod',
    'generate_prime',
    'is_probable_prime',
    'Keypair',
    'derive_keypair',
    'generate_keys',
    'generate_primes',
    'CipherFormatError',
    'encrypt',
    'decrypt',
    'encrypt_bytes',
    'decrypt_bytes',
]
