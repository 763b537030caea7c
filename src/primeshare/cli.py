# SPDX-FileCopyrightText: 2025 PrimeShare contributors
# SPDX-License-Identifier: MIT

"""Command line front end: ``primeshare split | join | demo``."""

from __future__ import annotations

import logging
from typing import IO, Optional

import click

from .config import load_policy
from .encoding import dump_shares, format_secret, load_shares, parse_secret
from .errors import ShareError
from .field import resolve_modulus
from .sharing import join, split

DEMO_SECRET = "0xe9873d79c6d87dc0fb6a5778633389f4453213303da61f20bd67fc233aa33262"

_logger = logging.getLogger(__name__)


def _abort(exc: ShareError) -> click.ClickException:
    _logger.debug("command failed with %s", type(exc).__name__)
    return click.ClickException(str(exc))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr.")
def main(verbose: bool) -> None:
    """Split secrets into threshold shares and join them back."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if verbose:
        logging.getLogger("primeshare").setLevel(logging.DEBUG)


@main.command("split")
@click.argument("secret")
@click.option(
    "-n", "--shares", "count", type=int,
    default=lambda: load_policy().shares, show_default="PRIMESHARE_SHARES or 10",
)
@click.option(
    "-k", "--threshold", type=int,
    default=lambda: load_policy().threshold, show_default="PRIMESHARE_THRESHOLD or 3",
)
@click.option(
    "--modulus", help="Prime name or integer.",
    default=lambda: load_policy().modulus, show_default="PRIMESHARE_MODULUS or mersenne-3217",
)
def split_cmd(secret: str, count: int, threshold: int, modulus: str) -> None:
    """Split SECRET (hex with 0x prefix, or decimal) into shares."""
    try:
        prime = resolve_modulus(modulus)
        shares = split(parse_secret(secret), count, threshold, prime)
    except ShareError as exc:
        raise _abort(exc) from exc
    click.echo(dump_shares(shares, prime))


@main.command("join")
@click.argument("source", type=click.File("r"), default="-")
@click.option("--modulus", default=None, help="Override the modulus stored in the document.")
def join_cmd(source: IO[str], modulus: Optional[str]) -> None:
    """Reconstruct a secret from a share document (file or stdin)."""
    try:
        shares, stored = load_shares(source.read())
        if modulus is not None:
            prime = resolve_modulus(modulus)
        elif stored is not None:
            prime = stored
        else:
            prime = load_policy().modulus_value
        secret = join(shares, prime)
    except ShareError as exc:
        raise _abort(exc) from exc
    click.echo(format_secret(secret))


@main.command("demo")
@click.argument("secret", default=DEMO_SECRET)
def demo_cmd(secret: str) -> None:
    """Split SECRET 10 ways with threshold 3 and join 2, 3 and 4 shares."""
    try:
        value = parse_secret(secret)
        prime = resolve_modulus("mersenne-3217")
        shares = split(value, 10, 3, prime)
    except ShareError as exc:
        raise _abort(exc) from exc
    click.echo("[Generating Shares...]")
    for label, size in (("less_than_threshold", 2), ("equal_to_threshold", 3), ("greater_than_threshold", 4)):
        click.echo(f"{label}: {join(shares[:size], prime) == value}")


if __name__ == "__main__":
    main()
