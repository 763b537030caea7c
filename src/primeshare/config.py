# SPDX-FileCopyrightText: 2025 PrimeShare contributors
# SPDX-License-Identifier: MIT

"""Default sharing parameters.

Values can be overridden by environment variables so the command line tool
can be pointed at another field or threshold without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .field import resolve_modulus


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class SharingPolicy:
    """Default share count, threshold and modulus name."""

    shares: int = 10
    threshold: int = 3
    modulus: str = "mersenne-3217"

    @property
    def modulus_value(self) -> int:
        return resolve_modulus(self.modulus)


def load_policy() -> SharingPolicy:
    """Load the sharing policy considering environment overrides."""

    return SharingPolicy(
        shares=_load_int("PRIMESHARE_SHARES", 10),
        threshold=_load_int("PRIMESHARE_THRESHOLD", 3),
        modulus=os.environ.get("PRIMESHARE_MODULUS", "mersenne-3217"),
    )


policy = load_policy()


__all__ = ["SharingPolicy", "policy", "load_policy"]
