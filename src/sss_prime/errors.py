# SPDX-FileCopyrightText: 2025 sss-prime contributors
# SPDX-License-Identifier: MIT

"""Exception hierarchy shared by the field and sharing layers."""

from __future__ import annotations


class SharingError(Exception):
    """Base class for every error raised by :mod:`sss_prime`."""


class InvalidParametersError(SharingError, ValueError):
    """Raised when a threshold, share count or share set cannot be used."""


class DuplicateShareCoordinateError(SharingError, ValueError):
    """Raised when two shares passed to reconstruction share an x-coordinate."""

    def __init__(self, x: int) -> None:
        super().__init__(f"Duplicate share x-coordinate: {x}")
        self.x = x


class NonInvertibleElementError(SharingError, ZeroDivisionError):
    """Raised when the multiplicative inverse of ``0 mod P`` is requested."""

    def __init__(self, value: int, modulus: int) -> None:
        super().__init__(f"{value} has no multiplicative inverse modulo {modulus}")
        self.value = value
        self.modulus = modulus


__all__ = [
    "SharingError",
    "InvalidParametersError",
    "DuplicateShareCoordinateError",
    "NonInvertibleElementError",
]
