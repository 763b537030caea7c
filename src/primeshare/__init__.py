# SPDX-FileCopyrightText: 2025 PrimeShare contributors
# SPDX-License-Identifier: MIT

"""Shamir (k, n) threshold secret sharing over a large prime field.

``split`` turns a secret into ``n`` shares and ``join`` recovers it from any
``k`` of them. Fewer than ``k`` shares yield an unrelated field element, not
an error: ``join`` cannot know the original threshold.
"""

from __future__ import annotations

from .errors import ShareDomainError, ShareError, ShareFormatError, ShareRangeError
from .field import DEFAULT_MODULUS, MERSENNE_3217, NAMED_PRIMES, PrimeField
from .inverse import modular_inverse
from .polynomial import Polynomial, evaluate, new_polynomial
from .sharing import Share, join, split

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MODULUS",
    "MERSENNE_3217",
    "NAMED_PRIMES",
    "Polynomial",
    "PrimeField",
    "Share",
    "ShareDomainError",
    "ShareError",
    "ShareFormatError",
    "ShareRangeError",
    "evaluate",
    "join",
    "modular_inverse",
    "new_polynomial",
    "split",
]
