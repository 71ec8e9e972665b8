# SPDX-FileCopyrightText: 2025 sharequorum contributors
# SPDX-License-Identifier: MIT
"""Arithmetic in GF(p).

Every helper receives the modulus explicitly; nothing in this module keeps
state. ``p`` is assumed to be prime. A composite modulus is not rejected and
simply produces meaningless results.
"""
from __future__ import annotations

from .errors import DivisionByZero

MERSENNE_127 = 2**127 - 1


def add(a: int, b: int, p: int) -> int:
    return (a + b) % p


def negate(a: int, p: int) -> int:
    return (-a) % p


def subtract(a: int, b: int, p: int) -> int:
    return (a - b) % p


def multiply(a: int, b: int, p: int) -> int:
    return (a * b) % p


def inverse(a: int, p: int) -> int:
    """Return ``a⁻¹ mod p``.

    Raises :class:`DivisionByZero` when ``a ≡ 0 (mod p)``.
    """
    a %= p
    if a == 0:
        raise DivisionByZero(f"0 has no inverse modulo {p}")
    # Fermat: a^(p-2) ≡ a^-1 for prime p
    return pow(a, p - 2, p)


__all__ = ["MERSENNE_127", "add", "negate", "subtract", "multiply", "inverse"]
