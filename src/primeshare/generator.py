"""Share generation.

The secret becomes the constant term of a random polynomial of degree
``k - 1`` and each share is that polynomial evaluated at one index in
``1..n``. Index 0 would be the secret itself and is never issued.
"""

from __future__ import annotations

import logging
import warnings
from typing import NamedTuple, Sequence

from . import config
from .codec import check_capacity, encode
from .errors import EmptySecretWarning, InvalidThreshold
from .field import PRIME
from .random_source import RandomSource, SystemRandomSource

_logger = logging.getLogger(__name__)


class Share(NamedTuple):
    index: int
    value: int


def evaluate(coefficients: Sequence[int], x: int, modulus: int = PRIME) -> int:
    """Evaluate ``coefficients`` (lowest degree first) at ``x`` by Horner's rule."""
    result = 0
    for coefficient in reversed(coefficients):
        result = (result * x + coefficient) % modulus
    return result


def validate_threshold(n: int, k: int, *, max_shares: int | None = None) -> None:
    if max_shares is None:
        max_shares = config.settings.max_shares
    if not 1 <= k <= n:
        raise InvalidThreshold(f"Threshold must satisfy 1 <= k <= n, got n={n}, k={k}")
    if n >= PRIME:
        raise InvalidThreshold(f"n={n} exceeds the {PRIME - 1} non-zero indices of the field")
    if n > max_shares:
        raise InvalidThreshold(f"At most {max_shares} shares can be issued, got n={n}")


def generate(
    secret: bytes,
    n: int,
    k: int,
    random_source: RandomSource | None = None,
    *,
    strict: bool | None = None,
    max_shares: int | None = None,
) -> list[Share]:
    """Split ``secret`` into ``n`` shares, any ``k`` of which recover it."""
    validate_threshold(n, k, max_shares=max_shares)
    if strict is None:
        strict = config.settings.strict_capacity
    check_capacity(secret, strict=strict)
    if not secret:
        warnings.warn(
            "empty secret encodes to 0 and cannot be told apart from a zero secret",
            EmptySecretWarning,
            stacklevel=2,
        )

    if random_source is None:
        random_source = SystemRandomSource()
    coefficients = [encode(secret)] + [random_source.next_uniform(PRIME) for _ in range(k - 1)]

    shares = [Share(x, evaluate(coefficients, x)) for x in range(1, n + 1)]
    _logger.info("generated %d shares with threshold %d", n, k)
    return shares


__all__ = ["Share", "evaluate", "validate_threshold", "generate"]
