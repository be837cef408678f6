"""Text form of shares: one ``"<index> <value>"`` line per share."""

from __future__ import annotations

import logging
from typing import Iterable, TextIO

from .errors import MalformedShareInput
from .generator import Share

_logger = logging.getLogger(__name__)


def format_share(share: tuple[int, int]) -> str:
    index, value = share
    return f"{index} {value}"


def format_shares(shares: Iterable[tuple[int, int]]) -> str:
    return "".join(format_share(share) + "\n" for share in shares)


def parse_share(line: str, lineno: int | None = None) -> Share:
    """Parse a line holding exactly two unsigned decimal integers."""
    fields = line.split()
    if len(fields) != 2:
        raise MalformedShareInput(
            f"expected 2 fields '<index> <value>', got {len(fields)}", lineno=lineno
        )
    if not all(field.isascii() and field.isdigit() for field in fields):
        raise MalformedShareInput("share fields must be unsigned integers", lineno=lineno)
    return Share(int(fields[0]), int(fields[1]))


def read_shares(stream: TextIO, k: int) -> list[Share]:
    """Read ``k`` shares from ``stream``, skipping blank lines."""
    shares: list[Share] = []
    lines = iter(stream)
    lineno = 0
    while len(shares) < k:
        try:
            line = next(lines)
        except StopIteration:
            break
        except UnicodeDecodeError as exc:
            raise MalformedShareInput("share input is not valid UTF-8 text", lineno=lineno + 1) from exc
        lineno += 1
        if not line.strip():
            continue
        shares.append(parse_share(line, lineno))
        _logger.debug("parsed share %d of %d from line %d", len(shares), k, lineno)
    if len(shares) < k:
        raise MalformedShareInput(f"expected {k} shares, found {len(shares)}")
    return shares


__all__ = ["format_share", "format_shares", "parse_share", "read_shares"]
