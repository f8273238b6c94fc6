# SPDX-FileCopyrightText: 2025 sss-prime contributors
# SPDX-License-Identifier: MIT

"""Centralised configuration for the sharing library.

Values are read once from the environment when the module is imported so
that the CLI and library callers agree on the field in use. Unparsable
overrides fall back to the defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .field import DEFAULT_PRIME, PrimeField

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_level(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().upper()
    if value not in _LOG_LEVELS:
        return default
    return value


@dataclass(frozen=True)
class SharingPolicy:
    """Runtime tunables for the field and diagnostics."""

    prime: int = DEFAULT_PRIME
    log_level: str = "WARNING"

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level)


def load_policy() -> SharingPolicy:
    """Load the policy considering ``SSS_PRIME`` and ``SSS_LOG_LEVEL``."""

    return SharingPolicy(
        prime=_load_int("SSS_PRIME", DEFAULT_PRIME),
        log_level=_load_level("SSS_LOG_LEVEL", "WARNING"),
    )


policy = load_policy()


def default_field() -> PrimeField:
    """Build the field for the configured prime.

    Raises ``ValueError`` if ``SSS_PRIME`` names a composite modulus.
    """
    return PrimeField(policy.prime)


__all__ = ["SharingPolicy", "policy", "load_policy", "default_field"]
