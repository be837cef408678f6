"""Error and warning types raised by :mod:`primeshare`."""

from __future__ import annotations


class ShareError(Exception):
    """Base class for every failure of a share operation."""


class InvalidThreshold(ShareError, ValueError):
    """Raised when ``(n, k)`` or the number of supplied shares is invalid."""


class DuplicateShareIndex(ShareError, ValueError):
    """Raised when two shares carry the same index."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Duplicate share index: {index}")
        self.index = index


class InvalidShare(ShareError, ValueError):
    """Raised when a share lies outside the field."""


class SecretTooLarge(ShareError, ValueError):
    """Raised in strict mode when a secret does not fit in one field element."""


class FieldDivisionByZero(ShareError, ZeroDivisionError):
    """Raised when the inverse of a multiple of the modulus is requested."""


class MalformedShareInput(ShareError, ValueError):
    """Raised when a share line is not two unsigned integers."""

    def __init__(self, message: str, *, lineno: int | None = None) -> None:
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)
        self.lineno = lineno


class EmptySecretWarning(UserWarning):
    """The secret is empty and encodes to 0, same as a true zero secret."""


__all__ = [
    "ShareError",
    "InvalidThreshold",
    "DuplicateShareIndex",
    "InvalidShare",
    "SecretTooLarge",
    "FieldDivisionByZero",
    "MalformedShareInput",
    "EmptySecretWarning",
]
