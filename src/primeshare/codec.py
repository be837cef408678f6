"""Conversion between secrets and field elements.

A secret is read as a big-endian base-256 number and reduced modulo
:data:`~primeshare.field.PRIME`. Only the residue survives, so secrets whose
value reaches the modulus cannot be recovered byte for byte. Three bytes always
fit; a fourth byte may already collide with another secret.

Decoding strips leading zero bytes: ``b"\\x00A"`` comes back as ``b"A"`` and
the empty secret, like ``b"\\x00"``, decodes to ``b""``.
"""

from __future__ import annotations

import logging

from .errors import SecretTooLarge
from .field import PRIME

_logger = logging.getLogger(__name__)

SAFE_SECRET_BYTES = 3


def encode(secret: bytes) -> int:
    acc = 0
    for byte in secret:
        acc = (acc * 256 + byte) % PRIME
    return acc


def decode(element: int) -> bytes:
    if element < 0:
        raise ValueError("field elements are non-negative")
    out = bytearray()
    while element > 0:
        out.append(element % 256)
        element //= 256
    out.reverse()
    return bytes(out)


def fits_in_field(secret: bytes) -> bool:
    """Return True when :func:`encode` keeps the full value of ``secret``."""
    return int.from_bytes(secret, "big") < PRIME


def check_capacity(secret: bytes, *, strict: bool) -> None:
    """Reject or report a secret that :func:`encode` would truncate."""
    if fits_in_field(secret):
        return
    message = (
        f"secret of {len(secret)} bytes exceeds the field capacity "
        f"({SAFE_SECRET_BYTES} bytes safe); only its residue modulo {PRIME} is shared"
    )
    if strict:
        raise SecretTooLarge(message)
    _logger.warning(message)


__all__ = [
    "SAFE_SECRET_BYTES",
    "encode",
    "decode",
    "fits_in_field",
    "check_capacity",
]
