# SPDX-FileCopyrightText: 2025 PrimeShare contributors
# SPDX-License-Identifier: MIT
#
# conftest.py: makes src/ importable without an editable install and keeps the
# sharing policy independent of the developer's environment.

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import pytest
from hypothesis import settings

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))

settings.register_profile("ci", max_examples=200, deadline=None)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


@pytest.fixture(autouse=True)
def _clean_policy_env(monkeypatch):
    """Drop PRIMESHARE_* overrides inherited from the shell."""
    for name in ("PRIMESHARE_SHARES", "PRIMESHARE_THRESHOLD", "PRIMESHARE_MODULUS"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """``primeshare -v`` raises the package logger level; undo it per test."""
    yield
    logging.getLogger("primeshare").setLevel(logging.NOTSET)
