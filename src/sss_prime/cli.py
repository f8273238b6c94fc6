# SPDX-FileCopyrightText: 2025 sss-prime contributors
# SPDX-License-Identifier: MIT

"""Command line demo: split a secret, print the shares, recombine them."""

from __future__ import annotations

import logging

import click

from .entropy import SeededEntropy, default_entropy
from .errors import InvalidParametersError
from .field import PrimeField
from .policy import policy
from .sharing import generate_shares, reconstruct_secret


def _build_field(ctx: click.Context, param: click.Parameter, value: int) -> PrimeField:
    try:
        return PrimeField(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("secret", type=int)
@click.argument("threshold", type=int)
@click.argument("share_count", type=int)
@click.option(
    "--prime",
    "field",
    type=int,
    default=lambda: policy.prime,
    show_default="SSS_PRIME or 32749",
    callback=_build_field,
    help="Prime modulus of the field.",
)
@click.option("--seed", type=int, default=None, help="Seed a reproducible (insecure) coefficient stream.")
@click.option(
    "--log-level",
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"], case_sensitive=False),
    default=lambda: policy.log_level,
    show_default="SSS_LOG_LEVEL or WARNING",
)
def main(secret: int, threshold: int, share_count: int, field: PrimeField, seed: int | None, log_level: str) -> None:
    """Split SECRET into SHARE_COUNT shares, any THRESHOLD of which recover it."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    entropy = SeededEntropy(seed) if seed is not None else default_entropy()

    try:
        shares = generate_shares(secret, threshold, share_count, field=field, entropy=entropy)
    except InvalidParametersError as exc:
        click.echo(f"Fatal: {exc}", err=True)
        raise SystemExit(1) from exc

    for i, share in enumerate(shares, start=1):
        click.echo(f"Share {i}: ({share.x}|{share.y})")

    recovered = reconstruct_secret(shares, field=field)
    click.echo(f"Secret reconstructed by all players: {recovered}")


if __name__ == "__main__":
    main()
