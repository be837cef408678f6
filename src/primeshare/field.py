"""Arithmetic in the prime field used by every share.

``PRIME`` is part of the share format: shares are meaningless to anyone who
does not use the same modulus, yet it is never written next to them.
"""

from __future__ import annotations

from .errors import FieldDivisionByZero

PRIME = 2**31 - 1  # 2147483647, Mersenne prime


def power(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent % modulus`` by square-and-multiply."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus <= 0:
        raise ValueError("modulus must be positive")

    result = 1 % modulus
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus
    return result


def inverse(a: int, modulus: int = PRIME) -> int:
    """Return ``a**-1 mod modulus`` using Fermat's little theorem.

    ``modulus`` must be prime.
    """
    if a % modulus == 0:
        raise FieldDivisionByZero(f"{a} has no inverse modulo {modulus}")
    return power(a, modulus - 2, modulus)


def sub_mod(a: int, b: int, modulus: int = PRIME) -> int:
    return (a - b + modulus) % modulus


__all__ = ["PRIME", "power", "inverse", "sub_mod"]
