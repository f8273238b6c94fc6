# SPDX-FileCopyrightText: 2025 sss-prime contributors
# SPDX-License-Identifier: MIT

"""Threshold secret sharing over a prime field."""

from __future__ import annotations

from .entropy import ClockSeededEntropy, EntropySource, SeededEntropy, SystemEntropy, default_entropy
from .errors import (
    DuplicateShareCoordinateError,
    InvalidParametersError,
    NonInvertibleElementError,
    SharingError,
)
from .field import DEFAULT_PRIME, PrimeField
from .sharing import Reconstructor, Share, ShareGenerator, generate_shares, reconstruct_secret

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_PRIME",
    "PrimeField",
    "Share",
    "ShareGenerator",
    "Reconstructor",
    "generate_shares",
    "reconstruct_secret",
    "EntropySource",
    "SystemEntropy",
    "SeededEntropy",
    "ClockSeededEntropy",
    "default_entropy",
    "SharingError",
    "InvalidParametersError",
    "DuplicateShareCoordinateError",
    "NonInvertibleElementError",
]
