# SPDX-FileCopyrightText: 2025 sharequorum contributors
# SPDX-License-Identifier: MIT
"""Majority-vote recovery of k-out-of-n Shamir secrets."""

from __future__ import annotations

from .combinations import combinations, count_combinations
from .consensus import VoteTally, find_actual_secret, tally_votes
from .errors import (
    DivisionByZero,
    DuplicateAbscissa,
    InsufficientShares,
    NoConsensus,
    ShareDecodeError,
    ShareQuorumError,
    TestCaseFormatError,
)
from .field import MERSENNE_127
from .interpolation import Reconstruction, attempt_reconstruction, reconstruct_secret
from .shares import Share

__version__ = "0.1.0"

__all__ = [
    "MERSENNE_127",
    "Share",
    "combinations",
    "count_combinations",
    "reconstruct_secret",
    "attempt_reconstruction",
    "Reconstruction",
    "VoteTally",
    "tally_votes",
    "find_actual_secret",
    "ShareQuorumError",
    "DivisionByZero",
    "DuplicateAbscissa",
    "InsufficientShares",
    "NoConsensus",
    "ShareDecodeError",
    "TestCaseFormatError",
]
