# SPDX-FileCopyrightText: 2025 sss-prime contributors
# SPDX-License-Identifier: MIT

"""Arithmetic in the prime field GF(P).

The field is described by :class:`PrimeField`, a frozen value object holding
the modulus. Every operation reduces its result into ``[0, P)``:

``power``
    Modular exponentiation by repeated squaring.

``multiplicative_inverse``
    Inverse via the extended Euclidean algorithm. Zero has no inverse and
    raises :class:`~sss_prime.errors.NonInvertibleElementError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import NonInvertibleElementError

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .entropy import EntropySource

DEFAULT_PRIME = 32749  # 2**15 - 19

# Witnesses that make Miller-Rabin deterministic below 3.3 * 10**24.
_MR_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)


def is_probable_prime(n: int) -> bool:
    """Return ``True`` if ``n`` passes Miller-Rabin for the fixed witness set."""
    if n < 2:
        return False
    for p in _MR_WITNESSES:
        if n % p == 0:
            return n == p

    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for a in _MR_WITNESSES:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = (x * x) % n
            if x == n - 1:
                break
        else:
            return False
    return True


def _extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, s, t)`` with ``s*a + t*b == g == gcd(a, b)``."""
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
        old_t, t = t, old_t - quotient * t
    return old_r, old_s, old_t


@dataclass(frozen=True)
class PrimeField:
    """The field of integers modulo a prime ``modulus``."""

    modulus: int = DEFAULT_PRIME

    def __post_init__(self) -> None:
        if isinstance(self.modulus, bool) or not isinstance(self.modulus, int):
            raise TypeError("Field modulus must be an integer")
        if self.modulus < 3:
            raise ValueError(f"Field modulus must be at least 3, got {self.modulus}")
        if not is_probable_prime(self.modulus):
            raise ValueError(f"Field modulus {self.modulus} is not prime")

    def normalize(self, value: int) -> int:
        """Fold ``value`` into ``[0, P)``; negative values wrap around."""
        return value % self.modulus

    def power(self, base: int, exponent: int) -> int:
        """Return ``base ** exponent mod P``.

        ``exponent`` must be non-negative. ``power(b, 0)`` is 1 for every
        ``b``, including multiples of the modulus.
        """
        if exponent < 0:
            raise ValueError(f"Exponent must be non-negative, got {exponent}")
        result = 1
        base = base % self.modulus
        while exponent:
            if exponent & 1:
                result = (result * base) % self.modulus
            base = (base * base) % self.modulus
            exponent >>= 1
        return result

    def multiplicative_inverse(self, x: int) -> int:
        """Return ``s`` in ``[0, P)`` such that ``s * x == 1 (mod P)``."""
        reduced = x % self.modulus
        if reduced == 0:
            raise NonInvertibleElementError(x, self.modulus)
        _, s, _ = _extended_gcd(reduced, self.modulus)
        return s % self.modulus

    def random_element(self, entropy: "EntropySource", *, nonzero: bool = False) -> int:
        """Draw a uniform element, redrawing zeros when ``nonzero`` is set."""
        while True:
            value = entropy.randbelow(self.modulus)
            if value or not nonzero:
                return value


def power(base: int, exponent: int, modulus: int = DEFAULT_PRIME) -> int:
    return PrimeField(modulus).power(base, exponent)


def multiplicative_inverse(x: int, modulus: int = DEFAULT_PRIME) -> int:
    return PrimeField(modulus).multiplicative_inverse(x)


__all__ = [
    "DEFAULT_PRIME",
    "PrimeField",
    "is_probable_prime",
    "power",
    "multiplicative_inverse",
]
