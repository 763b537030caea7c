# SPDX-FileCopyrightText: 2025 PrimeShare contributors
# SPDX-License-Identifier: MIT

"""Extended Euclidean algorithm and modular inverses."""

from __future__ import annotations

from .errors import ShareDomainError, ShareRangeError


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, s, t)`` such that ``a * s + b * t == g == gcd(a, b)``."""

    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
        old_t, t = t, old_t - quotient * t
    if old_r < 0:
        old_r, old_s, old_t = -old_r, -old_s, -old_t
    return old_r, old_s, old_t


def modular_inverse(a: int, modulus: int) -> int:
    """Return ``b`` in ``[0, modulus)`` with ``(a * b) % modulus == 1``.

    ``a`` is reduced first, so negative values are accepted. Raises
    :class:`ShareDomainError` when ``a`` is congruent to zero or shares a factor
    with ``modulus``.
    """

    if modulus < 2:
        raise ShareRangeError(f"modulus must be at least 2, got {modulus}")
    residue = a % modulus
    if residue == 0:
        raise ShareDomainError("0 has no inverse modulo the field prime")
    g, s, _ = extended_gcd(residue, modulus)
    if g != 1:
        raise ShareDomainError(f"value is not coprime with the modulus (gcd={g})")
    if s < 0:
        s += modulus
    return s % modulus


__all__ = ["extended_gcd", "modular_inverse"]
