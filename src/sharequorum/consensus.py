# SPDX-FileCopyrightText: 2025 sharequorum contributors
# SPDX-License-Identifier: MIT
"""Majority vote over every k-subset of the available shares.

Each all-honest subset interpolates to the same secret, while subsets that
touch a corrupted share generally land on scattered wrong values. The most
frequent value wins. This is frequency voting only: corrupted shares that
agree on a common wrong polynomial can outvote the honest ones, and no bound
on the number of tolerated corruptions is computed.
"""
from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence

from prometheus_client import Counter

from .combinations import combinations, count_combinations
from .errors import InsufficientShares, NoConsensus
from .interpolation import attempt_reconstruction
from .shares import Share, as_shares

_logger = logging.getLogger(__name__)

COMBINATIONS = Counter(
    "sharequorum_combinations",
    "Share combinations interpolated during consensus runs",
    ["outcome"],
)


class VoteTally:
    """Counts per reconstructed secret, iterated in first-seen order."""

    def __init__(self) -> None:
        self._counts: dict[int, int] = {}
        self.skipped = 0

    def record(self, value: int) -> None:
        self._counts[value] = self._counts.get(value, 0) + 1

    def __len__(self) -> int:
        return len(self._counts)

    def __getitem__(self, value: int) -> int:
        return self._counts[value]

    def __contains__(self, value: object) -> bool:
        return value in self._counts

    def __iter__(self) -> Iterator[int]:
        return iter(self._counts)

    def items(self) -> list[tuple[int, int]]:
        return list(self._counts.items())

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def winner(self) -> Optional[int]:
        """Value with the strictly highest count; earliest seen wins ties."""
        best: Optional[int] = None
        best_count = 0
        for value, count in self._counts.items():
            if count > best_count:
                best, best_count = value, count
        return best


def _check_threshold(n: int, k: int) -> None:
    if k < 1 or n < k:
        raise InsufficientShares(n, k)


def tally_votes(shares: Sequence[Share | tuple[int, int]], k: int, modulus: int) -> VoteTally:
    """Interpolate every ``k``-subset of ``shares`` and count the results."""
    points = as_shares(shares)
    _check_threshold(len(points), k)
    _logger.debug(
        "voting over %d combination(s) of %d share(s), k=%d",
        count_combinations(len(points), k),
        len(points),
        k,
    )
    tally = VoteTally()
    for combination in combinations(points, k):
        outcome = attempt_reconstruction(combination, modulus)
        if outcome.ok:
            COMBINATIONS.labels("ok").inc()
            tally.record(outcome.value)
        else:
            COMBINATIONS.labels("duplicate").inc()
            tally.skipped += 1
    return tally


def find_actual_secret(shares: Sequence[Share | tuple[int, int]], k: int, modulus: int) -> int:
    """Return the secret reconstructed by the most ``k``-subsets of ``shares``.

    Raises :class:`InsufficientShares` unless ``len(shares) >= k >= 1`` and
    :class:`NoConsensus` when no combination could be interpolated.
    """
    tally = tally_votes(shares, k, modulus)
    secret = tally.winner()
    if secret is None:
        raise NoConsensus(tally.skipped)
    _logger.debug(
        "secret elected with %d of %d vote(s), %d combination(s) skipped",
        tally[secret],
        tally.total,
        tally.skipped,
    )
    return secret


__all__ = ["VoteTally", "tally_votes", "find_actual_secret", "COMBINATIONS"]
