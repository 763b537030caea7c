# SPDX-FileCopyrightText: 2025 PrimeShare contributors
# SPDX-License-Identifier: MIT

"""(k, n) threshold sharing: split a secret into shares and join them back.

``split`` evaluates one fresh random polynomial of degree ``k - 1`` at
``x = 1 .. n``. ``join`` runs Lagrange interpolation at ``x = 0``.

``join`` has no notion of the original threshold. Given fewer than ``k``
shares it still returns a well-defined field element, namely the constant
term of the lower degree polynomial through those points, which is unrelated
to the secret. This is the hiding property of the scheme, so callers must
track the threshold themselves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Union

from .errors import ShareDomainError, ShareRangeError
from .field import DEFAULT_MODULUS, ModulusSpec, PrimeField, require_int, resolve_modulus
from .polynomial import RandBelow, evaluate, new_polynomial

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Share:
    """A single point ``(x, y)`` on the sharing polynomial."""

    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Share(x={self.x}, y=<{self.y.bit_length()} bits>)"


ShareLike = Union[Share, Sequence[int]]


def split(
    secret: int,
    n: int,
    k: int,
    modulus: ModulusSpec = DEFAULT_MODULUS,
    *,
    randbelow: Optional[RandBelow] = None,
) -> list[Share]:
    """Split *secret* into *n* shares, any *k* of which recover it."""

    modulus = resolve_modulus(modulus)
    secret = require_int(secret, "secret")
    n = require_int(n, "n")
    k = require_int(k, "k")
    if n <= 0:
        raise ShareRangeError(f"share count must be positive, got n={n}")
    if not 0 < k <= n:
        raise ShareRangeError(f"threshold must satisfy 0 < k <= n, got k={k}, n={n}")
    if n >= modulus:
        raise ShareRangeError("share count must be smaller than the modulus")
    if not 0 <= secret < modulus:
        raise ShareRangeError("secret is too large for the chosen modulus")

    polynomial = new_polynomial(secret, k - 1, modulus, randbelow)
    shares = [Share(x, evaluate(polynomial, x, modulus)) for x in range(1, n + 1)]
    _logger.debug("split secret into %d shares, threshold %d, %d-bit modulus", n, k, modulus.bit_length())
    return shares


def _coerce(share: ShareLike) -> Share:
    if isinstance(share, Share):
        x, y = share.x, share.y
    else:
        try:
            x, y = share
        except (TypeError, ValueError):
            raise TypeError(f"share must be a Share or an (x, y) pair, got {type(share).__name__}") from None
    return Share(require_int(x, "x"), require_int(y, "y"))


def _validated(shares: Iterable[ShareLike], field: PrimeField) -> list[Share]:
    points = [_coerce(share) for share in shares]
    if not points:
        raise ShareDomainError("at least one share is required")
    seen: set[int] = set()
    for share in points:
        if not 0 < share.x < field.modulus:
            raise ShareDomainError(f"share x must lie in [1, modulus), got {share.x}")
        if not field.contains(share.y):
            raise ShareDomainError(f"share y for x={share.x} lies outside [0, modulus)")
        if share.x in seen:
            raise ShareDomainError(f"duplicate share x-value {share.x}")
        seen.add(share.x)
    return points


def lagrange_basis(xs: Sequence[int], j: int, field: PrimeField) -> int:
    """Return the ``j``-th Lagrange basis polynomial evaluated at ``x = 0``."""

    x_j = xs[j]
    numerator = 1
    denominator = 1
    for i, x_i in enumerate(xs):
        if i == j:
            continue
        numerator = numerator * x_i % field.modulus
        denominator = denominator * (x_i - x_j) % field.modulus
    return field.div(numerator, denominator)


def join(shares: Iterable[ShareLike], modulus: ModulusSpec = DEFAULT_MODULUS) -> int:
    """Reconstruct the constant term of the polynomial through *shares*.

    Equals the secret only when at least the original threshold of shares
    from the same split is supplied. The result does not depend on the order
    of *shares*. Raises :class:`ShareDomainError` for an empty input, duplicate
    x-values or coordinates outside the field.
    """

    field = PrimeField(resolve_modulus(modulus))
    points = _validated(shares, field)
    xs = [share.x for share in points]
    secret = 0
    for j, share in enumerate(points):
        secret = field.add(secret, field.mul(share.y, lagrange_basis(xs, j, field)))
    _logger.debug("joined %d shares over %d-bit modulus", len(points), field.bits)
    return secret


__all__ = ["Share", "ShareLike", "join", "lagrange_basis", "split"]
