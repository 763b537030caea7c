# SPDX-FileCopyrightText: 2025 PrimeShare contributors
# SPDX-License-Identifier: MIT

"""Exception hierarchy shared by the field, polynomial and sharing layers."""

from __future__ import annotations


class ShareError(Exception):
    """Base class for every error raised by :mod:`primeshare`."""


class ShareRangeError(ShareError, ValueError):
    """A secret, coefficient or threshold parameter lies outside its range."""


class ShareDomainError(ShareError, ArithmeticError):
    """The requested operation has no answer in the field.

    Raised for duplicate share x-values and for values without a modular
    inverse.
    """


class ShareFormatError(ShareError, ValueError):
    """Serialized share or secret text could not be parsed."""


__all__ = ["ShareError", "ShareRangeError", "ShareDomainError", "ShareFormatError"]
