# SPDX-FileCopyrightText: 2025 PrimeShare contributors
# SPDX-License-Identifier: MIT

"""Exact integer arithmetic over a prime field.

Python's ``int`` is already arbitrary precision and ``%`` with a positive
modulus always yields a value in ``[0, p)``, so :class:`PrimeField` is a thin
layer that pins the modulus and refuses anything that is not an integer. A
float or :class:`decimal.Decimal` slipping into the arithmetic would silently
lose precision for field elements of this size.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import ShareFormatError, ShareRangeError
from .inverse import modular_inverse

MERSENNE_127 = 2**127 - 1
MERSENNE_521 = 2**521 - 1
MERSENNE_3217 = 2**3217 - 1
SECP256K1_PRIME = 2**256 - 2**32 - 977

NAMED_PRIMES: dict[str, int] = {
    "mersenne-127": MERSENNE_127,
    "mersenne-521": MERSENNE_521,
    "mersenne-3217": MERSENNE_3217,
    "secp256k1": SECP256K1_PRIME,
}

DEFAULT_MODULUS = MERSENNE_3217

ModulusSpec = Union[int, str]


def require_int(value: object, name: str = "value") -> int:
    """Return *value* if it is a plain integer, raise ``TypeError`` otherwise."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def resolve_modulus(value: ModulusSpec) -> int:
    """Turn a prime name, decimal/hex text or an int into a modulus."""

    if isinstance(value, str):
        text = value.strip().lower()
        if text in NAMED_PRIMES:
            return NAMED_PRIMES[text]
        try:
            modulus = int(text, 16) if text.startswith("0x") else int(text, 10)
        except ValueError:
            known = ", ".join(sorted(NAMED_PRIMES))
            raise ShareFormatError(
                f"unknown modulus {value!r}; use an integer or one of: {known}"
            ) from None
    else:
        modulus = require_int(value, "modulus")
    if modulus < 2:
        raise ShareRangeError(f"modulus must be at least 2, got {modulus}")
    return modulus


def modulus_name(modulus: int) -> str:
    for name, prime in NAMED_PRIMES.items():
        if prime == modulus:
            return name
    return hex(modulus)


@dataclass(frozen=True)
class PrimeField:
    """Integers modulo a fixed prime ``modulus``."""

    modulus: int

    def __post_init__(self) -> None:
        require_int(self.modulus, "modulus")
        if self.modulus < 2:
            raise ShareRangeError(f"modulus must be at least 2, got {self.modulus}")

    def __repr__(self) -> str:
        return f"PrimeField({modulus_name(self.modulus)}, bits={self.bits})"

    @property
    def bits(self) -> int:
        return self.modulus.bit_length()

    def contains(self, value: int) -> bool:
        """Return ``True`` if *value* is already a canonical element."""
        return 0 <= require_int(value) < self.modulus

    def reduce(self, value: int) -> int:
        return require_int(value) % self.modulus

    def add(self, a: int, b: int) -> int:
        return (require_int(a) + require_int(b)) % self.modulus

    def sub(self, a: int, b: int) -> int:
        return (require_int(a) - require_int(b)) % self.modulus

    def neg(self, a: int) -> int:
        return -require_int(a) % self.modulus

    def mul(self, a: int, b: int) -> int:
        return (require_int(a) * require_int(b)) % self.modulus

    @staticmethod
    def floor_div(a: int, b: int) -> int:
        """Exact integer floor division (not field division)."""
        if require_int(b, "divisor") == 0:
            raise ZeroDivisionError("integer division by zero")
        return require_int(a) // b

    @staticmethod
    def compare(a: int, b: int) -> int:
        """Return -1, 0 or 1 as *a* is below, equal to or above *b*."""
        a, b = require_int(a), require_int(b)
        return (a > b) - (a < b)

    def inv(self, a: int) -> int:
        return modular_inverse(require_int(a), self.modulus)

    def div(self, a: int, b: int) -> int:
        return self.mul(a, self.inv(b))


__all__ = [
    "DEFAULT_MODULUS",
    "MERSENNE_127",
    "MERSENNE_521",
    "MERSENNE_3217",
    "NAMED_PRIMES",
    "PrimeField",
    "SECP256K1_PRIME",
    "modulus_name",
    "require_int",
    "resolve_modulus",
]
