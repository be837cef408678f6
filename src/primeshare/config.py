"""Runtime settings shared by the library and the command line.

Values come from environment variables so deployments can tighten limits
without code changes. Unparseable values fall back to the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    return default


def _load_level(name: str, default: str) -> str:
    value = os.environ.get(name, "").strip().upper()
    if value in LOG_LEVELS:
        return value
    return default


def _load_path(name: str) -> Path | None:
    value = os.environ.get(name, "").strip()
    if not value:
        return None
    return Path(value).expanduser()


@dataclass(frozen=True)
class Settings:
    """Holds runtime tunables for share generation."""

    max_shares: int = 255
    strict_capacity: bool = False
    log_level: str = "WARNING"
    audit_dir: Path | None = None


def load_settings() -> Settings:
    """Load the settings considering environment overrides."""

    return Settings(
        max_shares=_load_int("PRIMESHARE_MAX_SHARES", 255),
        strict_capacity=_load_bool("PRIMESHARE_STRICT_CAPACITY", False),
        log_level=_load_level("PRIMESHARE_LOG_LEVEL", "WARNING"),
        audit_dir=_load_path("PRIMESHARE_AUDIT_DIR"),
    )


settings = load_settings()


__all__ = ["LOG_LEVELS", "Settings", "settings", "load_settings"]
