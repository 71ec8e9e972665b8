# SPDX-FileCopyrightText: 2025 sharequorum contributors
# SPDX-License-Identifier: MIT
"""Share points handed to the recovery engine."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True, order=True)
class Share:
    """One point ``(x, y)`` on the sharing polynomial."""

    x: int
    y: int

    def __iter__(self):
        yield self.x
        yield self.y


Combination = Sequence[Share]


def as_shares(points: Iterable[Share | tuple[int, int]]) -> list[Share]:
    """Normalise ``(x, y)`` tuples and :class:`Share` objects into shares.

    Repeated ``(x, y)`` pairs are kept once, at their first position.
    """
    result: list[Share] = []
    seen: set[Share] = set()
    for point in points:
        if isinstance(point, Share):
            share = point
        else:
            x, y = point
            share = Share(int(x), int(y))
        if share not in seen:
            seen.add(share)
            result.append(share)
    return result


__all__ = ["Share", "Combination", "as_shares"]
