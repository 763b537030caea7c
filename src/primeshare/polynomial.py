# SPDX-FileCopyrightText: 2025 PrimeShare contributors
# SPDX-License-Identifier: MIT

"""Random polynomials with a fixed constant term."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Callable, Optional

from .errors import ShareRangeError
from .field import require_int

RandBelow = Callable[[int], int]
"""Return a uniformly distributed integer in ``[0, upper)``."""


@dataclass(frozen=True)
class Polynomial:
    """Coefficients ``a_0 .. a_degree`` over ``Z/modulus``; ``a_0`` is the secret."""

    coefficients: tuple[int, ...]
    modulus: int

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def __repr__(self) -> str:
        # coefficients stay out of logs and tracebacks
        return f"Polynomial(degree={self.degree}, bits={self.modulus.bit_length()})"

    def __call__(self, x: int) -> int:
        return evaluate(self, x, self.modulus)


def new_polynomial(
    secret: int,
    degree: int,
    modulus: int,
    randbelow: Optional[RandBelow] = None,
) -> Polynomial:
    """Build a fresh polynomial of *degree* whose constant term is *secret*.

    The higher coefficients are drawn independently from ``[0, modulus)``
    through *randbelow*, which defaults to :func:`secrets.randbelow`. Pass a
    seeded ``random.Random().randrange`` for reproducible tests.
    """

    secret = require_int(secret, "secret")
    degree = require_int(degree, "degree")
    modulus = require_int(modulus, "modulus")
    if modulus < 2:
        raise ShareRangeError(f"modulus must be at least 2, got {modulus}")
    if not 0 <= secret < modulus:
        raise ShareRangeError("secret must satisfy 0 <= secret < modulus")
    if degree < 0:
        raise ShareRangeError(f"degree must be non-negative, got {degree}")

    draw = randbelow or secrets.randbelow
    coefficients = [secret]
    for _ in range(degree):
        coeff = require_int(draw(modulus), "random coefficient")
        if not 0 <= coeff < modulus:
            raise ShareRangeError("randomness source returned a value outside [0, modulus)")
        coefficients.append(coeff)
    return Polynomial(tuple(coefficients), modulus)


def evaluate(polynomial: Polynomial, x: int, modulus: int) -> int:
    """Return ``sum(a_i * x**i) mod modulus`` using Horner's rule."""

    x = require_int(x, "x")
    result = 0
    for coeff in reversed(polynomial.coefficients):
        result = (result * x + coeff) % modulus
    return result


__all__ = ["Polynomial", "RandBelow", "evaluate", "new_polynomial"]
