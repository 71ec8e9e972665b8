# SPDX-FileCopyrightText: 2025 sharequorum contributors
# SPDX-License-Identifier: MIT
"""Lazy enumeration of k-element subsets.

Subsets keep the relative order of the input and are produced in
lexicographic order of their indices, the same order as
:func:`itertools.combinations`.
"""
from __future__ import annotations

import math
from typing import Iterator, Sequence, TypeVar

T = TypeVar("T")


def combinations(items: Sequence[T], k: int) -> Iterator[tuple[T, ...]]:
    """Yield every ``k``-sized subset of ``items`` exactly once.

    Each call returns a fresh generator. ``k == 0`` yields a single empty
    tuple and ``k > len(items)`` yields nothing.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    pool = tuple(items)
    return _backtrack(pool, k)


def _backtrack(pool: tuple[T, ...], k: int) -> Iterator[tuple[T, ...]]:
    n = len(pool)
    chosen: list[int] = []  # indices into pool
    start = 0
    while True:
        # include candidates while the suffix can still complete the selection
        while len(chosen) < k and n - start >= k - len(chosen):
            chosen.append(start)
            start += 1
        if len(chosen) == k:
            yield tuple(pool[i] for i in chosen)
        # exclude the most recent pick and move past it
        while chosen:
            start = chosen.pop() + 1
            if n - start >= k - len(chosen):
                break
        else:
            return


def count_combinations(n: int, k: int) -> int:
    if k < 0 or k > n:
        return 0
    return math.comb(n, k)


__all__ = ["combinations", "count_combinations"]
