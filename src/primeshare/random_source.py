"""Sources of coefficient randomness.

Share generation takes its randomness as an argument. Production code uses
:class:`SystemRandomSource`; :class:`SeededRandomSource` exists so tests can
replay a generation. A source carries state, so concurrent generations should
each get their own instance.
"""

from __future__ import annotations

import random
import secrets
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    def next_uniform(self, modulus: int) -> int:
        """Return an integer drawn uniformly from ``[0, modulus - 1]``."""
        ...


class SystemRandomSource:
    """Draw from the operating system CSPRNG via :mod:`secrets`."""

    def next_uniform(self, modulus: int) -> int:
        return secrets.randbelow(modulus)


class SeededRandomSource:
    """Deterministic source for tests. Not suitable for real secrets."""

    def __init__(self, seed: int | str | bytes) -> None:
        self._rng = random.Random(seed)

    def next_uniform(self, modulus: int) -> int:
        return self._rng.randrange(modulus)


__all__ = ["RandomSource", "SystemRandomSource", "SeededRandomSource"]
