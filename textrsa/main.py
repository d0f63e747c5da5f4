"""
textrsa - Main Entry Point

Generates a keypair, reads one line from standard input, then prints the
encrypted and decrypted message.

Settings come from RSA_* environment variables (see textrsa.config).
"""

import logging

from .config import load_config
from .core_crypto.block_codec import decrypt, encrypt
from .core_crypto.keygen import generate_keys


def main():
    """Main entry point for textrsa."""
    config = load_config()

    level = getattr(logging, config.log_level, logging.WARNING)
    if config.verbose_numbers or config.verbose_encryption:
        # Dumps are logged at INFO
        level = min(level, logging.INFO)
    logging.basicConfig(level=level, format="%(message)s")

    keys = generate_keys(config.bit_length, config.variance, config=config)

    print(f"Using {config.bit_length}-bit keys ± {config.variance} bits\n")

    try:
        message = input("Enter message: ")
    except EOFError:
        message = ""

    cipher = encrypt(message, keys.e, keys.n, config)
    print(f"Encryption: {cipher}")

    decipher = decrypt(cipher, keys.d, keys.n, config)
    print(f"Decryption: {decipher}")


if __name__ == "__main__":
    main()
