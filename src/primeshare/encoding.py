# SPDX-FileCopyrightText: 2025 PrimeShare contributors
# SPDX-License-Identifier: MIT

"""Text and JSON forms of shares and secrets.

A share is written as ``{"x": "<decimal>", "y": "0x<hex>"}``. A share set is
a JSON object carrying the modulus next to the share list so that ``join``
can be run without out-of-band parameters.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, Mapping

from .errors import ShareFormatError
from .field import ModulusSpec, modulus_name, resolve_modulus
from .sharing import Share, ShareLike


def parse_secret(text: str) -> int:
    """Parse ``0x``-prefixed hex or plain decimal text into an integer."""

    cleaned = text.strip().lower().replace("_", "")
    try:
        if cleaned.startswith("0x"):
            return int(cleaned[2:], 16)
        return int(cleaned, 10)
    except ValueError:
        raise ShareFormatError("secret is neither 0x-hex nor decimal") from None


def format_secret(value: int) -> str:
    return hex(value)


def share_to_dict(share: ShareLike) -> dict[str, str]:
    x, y = share
    return {"x": str(x), "y": hex(y)}


def share_from_dict(data: Mapping[str, Any]) -> Share:
    try:
        raw_x = data["x"]
        raw_y = data["y"]
    except (KeyError, TypeError):
        raise ShareFormatError("share must carry 'x' and 'y' fields") from None
    try:
        x = int(str(raw_x), 10)
    except ValueError:
        raise ShareFormatError(f"malformed share (x field: {str(raw_x)!r})") from None
    y_text = str(raw_y).lower()
    try:
        y = int(y_text[2:], 16) if y_text.startswith("0x") else int(y_text, 16)
    except ValueError:
        # y stays out of the message, it is share material
        raise ShareFormatError(f"malformed y field in share x={x}") from None
    return Share(x, y)


def dump_shares(shares: Iterable[ShareLike], modulus: ModulusSpec, *, indent: int | None = 2) -> str:
    document = {
        "modulus": modulus_name(resolve_modulus(modulus)),
        "shares": [share_to_dict(share) for share in shares],
    }
    return json.dumps(document, indent=indent)


def load_shares(text: str) -> tuple[list[Share], int | None]:
    """Parse a share document, returning the shares and the modulus if present.

    A bare JSON list of shares is accepted as well, in which case the modulus
    is ``None``.
    """

    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ShareFormatError(f"share document is not valid JSON: {exc}") from None
    modulus: int | None = None
    if isinstance(document, dict):
        if "modulus" in document:
            modulus = resolve_modulus(str(document["modulus"]))
        entries = document.get("shares")
    else:
        entries = document
    if not isinstance(entries, list):
        raise ShareFormatError("share document must contain a list of shares")
    return [share_from_dict(entry) for entry in entries], modulus


__all__ = [
    "dump_shares",
    "format_secret",
    "load_shares",
    "parse_secret",
    "share_from_dict",
    "share_to_dict",
]
