# SPDX-FileCopyrightText: 2025 sss-prime contributors
# SPDX-License-Identifier: MIT

"""Shamir's threshold secret sharing over a prime field.

This module provides the two halves of the scheme:

:class:`ShareGenerator`
    Split an integer secret into ``n`` shares with a reconstruction threshold
    of ``t`` using a random polynomial of degree ``t - 1``.

:class:`Reconstructor`
    Recover the secret from share points produced by the generator using
    Lagrange interpolation at ``x = 0``.

:func:`generate_shares` and :func:`reconstruct_secret` wrap both classes for
one-off calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

from .entropy import EntropySource, default_entropy
from .errors import DuplicateShareCoordinateError, InvalidParametersError
from .field import PrimeField
from .polynomial import evaluate
from .policy import default_field

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Share:
    """One point ``(x, y)`` on the secret-encoding polynomial."""

    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y


ShareLike = Union[Share, Tuple[int, int]]


def _require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


class ShareGenerator:
    """Produce shares of a secret with a fresh random polynomial per call."""

    def __init__(self, field: PrimeField | None = None, entropy: EntropySource | None = None) -> None:
        self.field = field if field is not None else default_field()
        self.entropy = entropy if entropy is not None else default_entropy()

    def _check_parameters(self, threshold: int, share_count: int) -> None:
        if threshold < 1:
            raise InvalidParametersError(f"Threshold must be at least 1, got {threshold}")
        if share_count < threshold:
            raise InvalidParametersError(
                f"Number of shares ({share_count}) is smaller than the threshold ({threshold})"
            )
        if share_count > self.field.modulus - 1:
            raise InvalidParametersError(
                f"At most {self.field.modulus - 1} shares fit the field, got {share_count}"
            )

    def generate(self, secret: int, threshold: int, share_count: int) -> list[Share]:
        """Split ``secret`` into ``share_count`` shares with threshold ``threshold``.

        The secret is reduced modulo the field prime first, so negative and
        oversized values wrap instead of being rejected. Shares use the
        x-coordinates ``1..share_count`` in order.

        Raises :class:`InvalidParametersError` when ``share_count`` is below
        ``threshold``; nothing is generated in that case.
        """
        secret = _require_int("secret", secret)
        threshold = _require_int("threshold", threshold)
        share_count = _require_int("share_count", share_count)
        self._check_parameters(threshold, share_count)

        reseed = getattr(self.entropy, "reseed", None)
        if callable(reseed):
            reseed()

        coefficients = [self.field.normalize(secret)]
        coefficients.extend(
            self.field.random_element(self.entropy, nonzero=True) for _ in range(threshold - 1)
        )

        shares = [Share(x, evaluate(x, coefficients, self.field)) for x in range(1, share_count + 1)]
        _logger.debug(
            "Generated %d shares with threshold %d over GF(%d)",
            share_count,
            threshold,
            self.field.modulus,
        )
        return shares


class Reconstructor:
    """Recover polynomial values from shares by Lagrange interpolation."""

    def __init__(self, field: PrimeField | None = None) -> None:
        self.field = field if field is not None else default_field()

    def _points(self, shares: Iterable[ShareLike]) -> list[tuple[int, int]]:
        points: list[tuple[int, int]] = []
        seen: set[int] = set()
        for share in shares:
            x, y = share
            x = self.field.normalize(_require_int("x", x))
            y = self.field.normalize(_require_int("y", y))
            if x in seen:
                raise DuplicateShareCoordinateError(x)
            seen.add(x)
            points.append((x, y))
        if not points:
            raise InvalidParametersError("At least one share is required")
        return points

    def interpolate_at(self, shares: Iterable[ShareLike], x: int) -> int:
        """Evaluate the polynomial through ``shares`` at ``x``.

        Raises :class:`DuplicateShareCoordinateError` if two shares carry the
        same x-coordinate modulo the field prime.
        """
        points = self._points(shares)
        p = self.field.modulus
        total = 0
        for i, (xi, yi) in enumerate(points):
            basis = 1
            for j, (xj, _) in enumerate(points):
                if i == j:
                    continue
                basis = (basis * (x - xj) * self.field.multiplicative_inverse(xi - xj)) % p
            total = (total + yi * basis) % p
        return total

    def combine(self, shares: Iterable[ShareLike]) -> int:
        """Recover the secret, the polynomial's value at ``x = 0``.

        No check is made that the shares come from one generation call or
        that at least ``threshold`` of them are present; such inputs yield an
        unrelated value.
        """
        secret = self.interpolate_at(shares, 0)
        _logger.debug("Combined shares over GF(%d)", self.field.modulus)
        return secret


def generate_shares(
    secret: int,
    threshold: int,
    share_count: int,
    *,
    field: PrimeField | None = None,
    entropy: EntropySource | None = None,
) -> list[Share]:
    """Split ``secret`` into ``share_count`` shares; see :meth:`ShareGenerator.generate`."""
    return ShareGenerator(field, entropy).generate(secret, threshold, share_count)


def reconstruct_secret(shares: Iterable[ShareLike], *, field: PrimeField | None = None) -> int:
    """Recover the secret from ``shares``; see :meth:`Reconstructor.combine`."""
    return Reconstructor(field).combine(shares)


__all__ = [
    "Share",
    "ShareGenerator",
    "Reconstructor",
    "generate_shares",
    "reconstruct_secret",
]
