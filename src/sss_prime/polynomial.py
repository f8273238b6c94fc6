# SPDX-FileCopyrightText: 2025 sss-prime contributors
# SPDX-License-Identifier: MIT

"""Polynomial evaluation over a prime field."""

from __future__ import annotations

from typing import Sequence

from .field import PrimeField


def evaluate(x: int, coefficients: Sequence[int], field: PrimeField) -> int:
    """Return ``sum(coefficients[i] * x**i) mod P``.

    ``coefficients[0]`` is the constant term. An empty sequence is the zero
    polynomial.
    """
    result = 0
    for i, coefficient in enumerate(coefficients):
        result = (result + coefficient * field.power(x, i)) % field.modulus
    return result


__all__ = ["evaluate"]
