# SPDX-FileCopyrightText: 2025 sharequorum contributors
# SPDX-License-Identifier: MIT
"""Exception hierarchy shared by the recovery engine and its collaborators."""
from __future__ import annotations


class ShareQuorumError(Exception):
    """Base class for every error raised by :mod:`sharequorum`."""


class DivisionByZero(ShareQuorumError, ZeroDivisionError):
    """Raised when a field element congruent to zero has to be inverted."""


class DuplicateAbscissa(DivisionByZero):
    """Two shares of one combination have x values congruent mod p."""

    def __init__(self, x_a: int, x_b: int, modulus: int) -> None:
        super().__init__(f"x={x_a} and x={x_b} coincide modulo {modulus}")
        self.x_a = x_a
        self.x_b = x_b
        self.modulus = modulus


class InsufficientShares(ShareQuorumError):
    def __init__(self, available: int, threshold: int) -> None:
        super().__init__(f"{available} share(s) available, threshold is {threshold}")
        self.available = available
        self.threshold = threshold


class NoConsensus(ShareQuorumError):
    def __init__(self, attempted: int) -> None:
        super().__init__(f"none of {attempted} combination(s) could be interpolated")
        self.attempted = attempted


class ShareDecodeError(ShareQuorumError, ValueError):
    pass


class TestCaseFormatError(ShareQuorumError, ValueError):
    __test__ = False  # keep pytest from collecting it


__all__ = [
    "ShareQuorumError",
    "DivisionByZero",
    "DuplicateAbscissa",
    "InsufficientShares",
    "NoConsensus",
    "ShareDecodeError",
    "TestCaseFormatError",
]
