"""Secret recovery by Lagrange interpolation at x = 0.

Nothing here can tell a good share set from a bad one. Too few shares, shares
from different generations, or a threshold that differs from the one used at
generation time all produce some field element, decoded like any other.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .codec import decode
from .errors import DuplicateShareIndex, InvalidShare, InvalidThreshold
from .field import PRIME, inverse, sub_mod

_logger = logging.getLogger(__name__)


def _checked_points(points: Iterable[tuple[int, int]], modulus: int) -> list[tuple[int, int]]:
    checked: list[tuple[int, int]] = []
    seen: set[int] = set()
    for x, y in points:
        if not 0 < x < modulus:
            raise InvalidShare(f"Share index {x} outside [1, {modulus - 1}]")
        if not 0 <= y < modulus:
            raise InvalidShare(f"Share value {y} outside [0, {modulus - 1}]")
        if x in seen:
            raise DuplicateShareIndex(x)
        seen.add(x)
        checked.append((x, y))
    return checked


def interpolate_at(points: Iterable[tuple[int, int]], x: int = 0, modulus: int = PRIME) -> int:
    """Evaluate at ``x`` the lowest-degree polynomial through ``points``."""
    checked = _checked_points(points, modulus)
    if not checked:
        raise ValueError("at least one point is required")

    total = 0
    for i, (xi, yi) in enumerate(checked):
        num = 1
        den = 1
        for j, (xj, _) in enumerate(checked):
            if i == j:
                continue
            num = (num * sub_mod(x, xj, modulus)) % modulus
            den = (den * sub_mod(xi, xj, modulus)) % modulus
        term = (yi * num % modulus) * inverse(den, modulus) % modulus
        total = (total + term) % modulus
    return total


def reconstruct(shares: Sequence[tuple[int, int]], k: int | None = None) -> bytes:
    """Recover the secret bytes from ``k`` shares in any order.

    When ``k`` is given the number of shares must match it exactly.
    """
    if k is not None:
        if k < 1:
            raise InvalidThreshold(f"Threshold must be positive, got k={k}")
        if len(shares) != k:
            raise InvalidThreshold(f"Expected exactly {k} shares, got {len(shares)}")
    secret = decode(interpolate_at(shares, 0))
    _logger.info("reconstructed secret from %d shares", len(shares))
    return secret


__all__ = ["interpolate_at", "reconstruct"]
