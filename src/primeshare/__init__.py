"""(k, n) threshold secret sharing over the prime field 2**31 - 1.

``generate_shares``
    Split a short secret into ``n`` shares with a reconstruction threshold of
    ``k``.

``reconstruct_secret``
    Recover the secret bytes from ``k`` shares produced by
    :func:`generate_shares`.

The secret is held in a single field element, so only about three bytes fit.
Shares carry no integrity check: wrong or too few shares yield a wrong secret
without any error.
"""

from __future__ import annotations

from typing import Sequence

from .errors import (
    DuplicateShareIndex,
    EmptySecretWarning,
    FieldDivisionByZero,
    InvalidShare,
    InvalidThreshold,
    MalformedShareInput,
    SecretTooLarge,
    ShareError,
)
from .field import PRIME
from .generator import Share, generate
from .random_source import RandomSource, SeededRandomSource, SystemRandomSource
from .reconstructor import reconstruct

__version__ = "0.1.0"


def generate_shares(
    secret: str | bytes,
    n: int,
    k: int,
    random_source: RandomSource | None = None,
) -> list[Share]:
    """Split ``secret`` into ``n`` shares, any ``k`` of which recover it."""
    if isinstance(secret, str):
        secret = secret.encode("utf-8")
    return generate(secret, n, k, random_source)


def reconstruct_secret(shares: Sequence[tuple[int, int]], k: int | None = None) -> bytes:
    """Recover the secret bytes from ``shares``."""
    return reconstruct(shares, k)


__all__ = [
    "PRIME",
    "Share",
    "RandomSource",
    "SystemRandomSource",
    "SeededRandomSource",
    "generate_shares",
    "reconstruct_secret",
    "ShareError",
    "InvalidThreshold",
    "DuplicateShareIndex",
    "InvalidShare",
    "SecretTooLarge",
    "FieldDivisionByZero",
    "MalformedShareInput",
    "EmptySecretWarning",
]
