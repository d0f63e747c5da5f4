"""
textrsa - textbook RSA key generation and block encryption.

Not a secure encryption scheme: no padding, no protection against
chosen-ciphertext or timing attacks.
"""

__version__ = "1.0.0"
