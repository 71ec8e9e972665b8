# SPDX-FileCopyrightText: 2025 sharequorum contributors
# SPDX-License-Identifier: MIT
"""Turn raw test-case entries into :class:`~sharequorum.shares.Share` objects.

An entry is either ``{"base": "16", "value": "1f"}`` or an integer
expression such as ``{"value": "lcm(4, 6)"}``. Entries that cannot be decoded
are dropped with a warning rather than failing the whole test case.
"""
from __future__ import annotations

import logging
import math
import re
from functools import reduce
from typing import Any, Callable, Mapping, Optional

from .errors import ShareDecodeError
from .shares import Share

_logger = logging.getLogger(__name__)

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_CALL_RE = re.compile(r"^\s*([A-Za-z_]\w*)\s*\((.*)\)\s*$", re.DOTALL)
_INT_RE = re.compile(r"^-?\d+$")


def _product(values: list[int]) -> int:
    return reduce(lambda acc, v: acc * v, values, 1)


FUNCTIONS: dict[str, Callable[[list[int]], int]] = {
    "sum": sum,
    "multiply": _product,
    "product": _product,
    "mul": _product,
    "gcd": lambda values: math.gcd(*values),
    "hcf": lambda values: math.gcd(*values),
    "lcm": lambda values: math.lcm(*values),
}

MIN_OPERANDS = 2


def decode_base(value: str, base: int | str) -> int:
    """Parse ``value`` written in ``base`` (2..36)."""
    try:
        radix = int(str(base).strip())
    except ValueError:
        raise ShareDecodeError(f"invalid base {base!r}") from None
    if not 2 <= radix <= 36:
        raise ShareDecodeError(f"base {radix} outside 2..36")
    digits = str(value).strip().lower()
    if not digits:
        raise ShareDecodeError("empty value")
    result = 0
    for ch in digits:
        digit = _DIGITS.find(ch)
        if digit < 0 or digit >= radix:
            raise ShareDecodeError(f"digit {ch!r} is not valid in base {radix}")
        result = result * radix + digit
    return result


def evaluate_expression(text: str) -> int:
    """Evaluate ``name(a, b, ...)`` for the functions in :data:`FUNCTIONS`."""
    match = _CALL_RE.match(text)
    if match is None:
        raise ShareDecodeError(f"not a function call: {text!r}")
    name, raw_args = match.group(1).lower(), match.group(2)
    func = FUNCTIONS.get(name)
    if func is None:
        raise ShareDecodeError(f"unknown function {name!r}")
    operands = [arg.strip() for arg in raw_args.split(",")] if raw_args.strip() else []
    if len(operands) < MIN_OPERANDS:
        raise ShareDecodeError(f"{name} expects at least {MIN_OPERANDS} operands, got {len(operands)}")
    values = []
    for operand in operands:
        if not _INT_RE.match(operand):
            raise ShareDecodeError(f"operand {operand!r} is not an integer literal")
        values.append(int(operand))
    return func(values)


def decode_y(entry: Mapping[str, Any]) -> int:
    if not isinstance(entry, Mapping):
        raise ShareDecodeError(f"share entry must be a mapping, got {type(entry).__name__}")
    if "value" not in entry:
        raise ShareDecodeError("share entry has no 'value'")
    value = str(entry["value"])
    if "base" in entry:
        return decode_base(value, entry["base"])
    if "(" in value:
        return evaluate_expression(value)
    return decode_base(value, 10)


def decode_share(x: int | str, entry: Mapping[str, Any]) -> Optional[Share]:
    """Return the decoded share, or ``None`` when ``entry`` is malformed."""
    try:
        xs = str(x).strip()
        if not _INT_RE.match(xs):
            raise ShareDecodeError(f"share key {x!r} is not an integer")
        return Share(int(xs), decode_y(entry))
    except ShareDecodeError as exc:
        _logger.warning("dropping share %s: %s", x, exc)
        return None


__all__ = ["decode_base", "evaluate_expression", "decode_y", "decode_share", "FUNCTIONS"]
