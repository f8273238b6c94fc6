# SPDX-FileCopyrightText: 2025 sss-prime contributors
# SPDX-License-Identifier: MIT
#
# conftest.py - test environment:
#   • src/ on sys.path so the package imports without installation
#   • fixed field and deterministic entropy fixtures

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))

from sss_prime.entropy import SeededEntropy  # noqa: E402
from sss_prime.field import DEFAULT_PRIME, PrimeField  # noqa: E402


@pytest.fixture
def field() -> PrimeField:
    return PrimeField(DEFAULT_PRIME)


@pytest.fixture
def entropy() -> SeededEntropy:
    return SeededEntropy(1234)
