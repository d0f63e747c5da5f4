"""
Runtime configuration.

Values come from the environment (optionally a .env file in the working
directory, loaded with python-dotenv). Every setting has a default, so an
empty environment gives a working configuration.
"""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv


DEFAULT_BITS = 256
DEFAULT_VARIANCE = 32

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""
    pass


@dataclass(frozen=True)
class RSAConfig:
    """
    Settings threaded through key generation and the block codec.

    verbose_numbers dumps the generated primes, modulus, totient and keys;
    verbose_encryption dumps every block before and after each step.
    """
    bit_length: int = DEFAULT_BITS
    variance: int = DEFAULT_VARIANCE
    verbose_numbers: bool = False
    verbose_encryption: bool = False
    retry_missing_inverse: bool = True
    log_level: str = "WARNING"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def load_config(use_dotenv: bool = True) -> RSAConfig:
    """
    Build an RSAConfig from RSA_* environment variables.

    Args:
        use_dotenv: Also read the nearest .env file, searching upward from
            the working directory; real environment variables win

    Raises:
        ConfigError: If a variable cannot be parsed
    """
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    return RSAConfig(
        bit_length=_env_int("RSA_BITS", DEFAULT_BITS),
        variance=_env_int("RSA_VARIANCE", DEFAULT_VARIANCE),
        verbose_numbers=_env_bool("RSA_DEBUG_NUMBERS", False),
        verbose_encryption=_env_bool("RSA_DEBUG_ENCRYPTION", False),
        retry_missing_inverse=_env_bool("RSA_RETRY_INVERSE", True),
        log_level=os.getenv("RSA_LOG_LEVEL", "WARNING").strip().upper() or "WARNING",
    )
