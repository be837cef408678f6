# SPDX-FileCopyrightText: 2025 PrimeShare contributors
# SPDX-License-Identifier: MIT
#
# conftest.py: test environment
#   • src/ on sys.path so tests run without installing the package
#   • PRIMESHARE_* variables cleared so host settings do not leak into tests

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def _clean_primeshare_env(monkeypatch):
    """Drop PRIMESHARE_* overrides coming from the host environment."""
    for name in (
        "PRIMESHARE_MAX_SHARES",
        "PRIMESHARE_STRICT_CAPACITY",
        "PRIMESHARE_LOG_LEVEL",
        "PRIMESHARE_AUDIT_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
