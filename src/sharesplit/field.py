"""Arithmetic over the prime field GF(257).

Every secret byte lives in this field. The modulus is one larger than the
largest byte value, so the only element that is not a byte is ``256``; it
shows up in share bodies and is written with the ``G0`` sentinel.
"""
from __future__ import annotations

from .errors import DivisionByZero, InvalidParameters

PRIME = 257
BYTE_SENTINEL_VALUE = PRIME - 1


def normalize(value: int, modulus: int = PRIME) -> int:
    """Reduce ``value`` into ``[0, modulus - 1]``."""

    return value % modulus


def mod_pow(base: int, exponent: int, modulus: int = PRIME) -> int:
    """Compute ``base ** exponent % modulus`` by square-and-multiply."""

    if exponent < 0:
        raise InvalidParameters("exponent must be non-negative")
    if modulus < 1:
        raise InvalidParameters("modulus must be positive")
    result = 1 % modulus
    base = normalize(base, modulus)
    while exponent:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    return result


def mod_inverse(value: int, modulus: int = PRIME) -> int:
    """Return the multiplicative inverse of ``value`` modulo ``modulus``.

    Uses the extended Euclidean algorithm. Raises :class:`DivisionByZero`
    when ``value`` is congruent to zero (or shares a factor with a composite
    modulus).
    """

    a = normalize(value, modulus)
    if a == 0:
        raise DivisionByZero(f"{value} has no inverse modulo {modulus}")
    old_r, r = modulus, a
    old_s, s = 0, 1
    while r:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
    if old_r != 1:
        raise DivisionByZero(f"{value} has no inverse modulo {modulus}")
    return normalize(old_s, modulus)


__all__ = ["PRIME", "BYTE_SENTINEL_VALUE", "normalize", "mod_pow", "mod_inverse"]
