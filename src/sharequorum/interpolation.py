# SPDX-FileCopyrightText: 2025 sharequorum contributors
# SPDX-License-Identifier: MIT
"""Lagrange interpolation of a share combination at ``x = 0``."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from . import field
from .errors import DivisionByZero, DuplicateAbscissa
from .shares import Combination

_logger = logging.getLogger(__name__)


def _clashing_pair(xj: int, points: Combination, j: int, p: int) -> tuple[int, int]:
    for m, (xm, _) in enumerate(points):
        if m != j and (xj - xm) % p == 0:
            return xj, xm
    return xj, xj  # pragma: no cover - a zero product always has a zero factor for prime p


def reconstruct_secret(combination: Combination, modulus: int) -> int:
    """Return ``f(0) mod modulus`` for the polynomial through ``combination``.

    Raises :class:`DuplicateAbscissa` when two x values coincide modulo
    ``modulus``.
    """
    if not combination:
        raise ValueError("at least one share is required")
    p = modulus
    secret = 0
    for j, (xj, yj) in enumerate(combination):
        numerator = 1
        denominator = 1
        for m, (xm, _) in enumerate(combination):
            if m == j:
                continue
            numerator = field.multiply(numerator, field.negate(xm, p), p)
            denominator = field.multiply(denominator, field.subtract(xj, xm, p), p)
        try:
            lagrange = field.multiply(numerator, field.inverse(denominator, p), p)
        except DivisionByZero as exc:
            x_a, x_b = _clashing_pair(xj, combination, j, p)
            raise DuplicateAbscissa(x_a, x_b, p) from exc
        secret = field.add(secret, field.multiply(yj, lagrange, p), p)
    return secret


@dataclass(frozen=True)
class Reconstruction:
    """Outcome of one interpolation attempt.

    Exactly one of ``value`` and ``duplicate`` is set.
    """

    value: Optional[int] = None
    duplicate: Optional[tuple[int, int]] = None

    @property
    def ok(self) -> bool:
        return self.duplicate is None


def attempt_reconstruction(combination: Combination, modulus: int) -> Reconstruction:
    try:
        value = reconstruct_secret(combination, modulus)
    except DuplicateAbscissa as exc:
        _logger.debug("skipping combination: %s", exc)
        return Reconstruction(duplicate=(exc.x_a, exc.x_b))
    return Reconstruction(value=value)


__all__ = ["reconstruct_secret", "attempt_reconstruction", "Reconstruction"]
