# SPDX-FileCopyrightText: 2025 sss-prime contributors
# SPDX-License-Identifier: MIT

"""Randomness sources injected into share generation.

Share generation never reaches for global randomness itself; it asks an
:class:`EntropySource` for field elements. That keeps the strength of the
scheme substitutable and lets tests pin the coefficient stream.
"""

from __future__ import annotations

import logging
import random
import secrets
import time
from typing import Callable, Protocol, runtime_checkable

_logger = logging.getLogger(__name__)


@runtime_checkable
class EntropySource(Protocol):
    """Anything able to return a uniform integer in ``[0, upper)``."""

    def randbelow(self, upper: int) -> int:
        ...


def _check_upper(upper: int) -> None:
    if upper <= 0:
        raise ValueError(f"Upper bound must be positive, got {upper}")


class SystemEntropy:
    """Operating system CSPRNG via :mod:`secrets`."""

    def randbelow(self, upper: int) -> int:
        _check_upper(upper)
        return secrets.randbelow(upper)

    def __repr__(self) -> str:
        return "SystemEntropy()"


class SeededEntropy:
    """Deterministic stream for tests and reproducible demos.

    Two instances created with the same seed produce the same sequence. The
    stream is predictable and must not protect real secrets.
    """

    def __init__(self, seed: int | str | bytes) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def randbelow(self, upper: int) -> int:
        _check_upper(upper)
        return self._rng.randrange(upper)

    def __repr__(self) -> str:
        return f"SeededEntropy(seed={self.seed!r})"


class ClockSeededEntropy:
    """PRNG reseeded from the nanosecond part of the wall clock.

    Each call to :meth:`reseed` (done once per generation call) draws a
    fresh seed from ``clock``. Rapid successive calls may reuse a seed and
    the seed space is at most 10**9, so this source is weak.
    """

    def __init__(self, clock: Callable[[], int] = time.time_ns) -> None:
        self._clock = clock
        self._rng = random.Random()
        self.reseed()
        _logger.warning("ClockSeededEntropy is predictable; use SystemEntropy for real secrets")

    def reseed(self) -> int:
        seed = self._clock() % 1_000_000_000
        self._rng.seed(seed)
        return seed

    def randbelow(self, upper: int) -> int:
        _check_upper(upper)
        return self._rng.randrange(upper)

    def __repr__(self) -> str:
        return "ClockSeededEntropy()"


_system_entropy = SystemEntropy()


def default_entropy() -> SystemEntropy:
    """Return the process-wide :class:`SystemEntropy` instance."""
    return _system_entropy


__all__ = [
    "EntropySource",
    "SystemEntropy",
    "SeededEntropy",
    "ClockSeededEntropy",
    "default_entropy",
]
