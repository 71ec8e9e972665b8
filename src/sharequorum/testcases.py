# SPDX-FileCopyrightText: 2025 sharequorum contributors
# SPDX-License-Identifier: MIT
"""Load test-case documents and run the consensus engine over them."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

import yaml
from prometheus_client import Counter

from .consensus import find_actual_secret
from .decoding import decode_share
from .errors import InsufficientShares, NoConsensus, TestCaseFormatError
from .shares import Share

_logger = logging.getLogger(__name__)

TESTCASES = Counter(
    "sharequorum_testcases",
    "Test cases processed by the driver",
    ["outcome"],
)


@dataclass
class TestCase:
    __test__ = False

    name: str
    k: int
    n: int
    shares: list[Share] = field(default_factory=list)


@dataclass
class TestCaseResult:
    __test__ = False

    name: str
    secret: int


def _read_document(source: os.PathLike[str] | str) -> Any:
    text = Path(source).read_text(encoding="utf-8")
    # safe_load also understands plain JSON
    return yaml.safe_load(text)


def _as_int(value: Any, label: str) -> int:
    if isinstance(value, bool):
        raise TestCaseFormatError(f"{label} must be an integer")
    try:
        return int(str(value).strip())
    except ValueError:
        raise TestCaseFormatError(f"{label} must be an integer, got {value!r}") from None


def _declared_count(keys: Mapping[str, Any], name: str, decoded: int) -> int:
    if "n" not in keys:
        return decoded
    try:
        return _as_int(keys["n"], "keys.n")
    except TestCaseFormatError as exc:
        _logger.warning("%s: ignoring %s", name, exc)
        return decoded


def parse_test_case(document: Any, *, name: str = "<memory>") -> TestCase:
    if not isinstance(document, Mapping):
        raise TestCaseFormatError(f"{name}: top level must be a mapping")
    keys = document.get("keys")
    if not isinstance(keys, Mapping) or "k" not in keys:
        raise TestCaseFormatError(f"{name}: missing 'keys.k'")
    k = _as_int(keys["k"], "keys.k")

    shares: list[Share] = []
    for raw_x, entry in document.items():
        if raw_x == "keys":
            continue
        share = decode_share(raw_x, entry)
        if share is not None:
            shares.append(share)
    # identical (x, y) entries count once
    shares = sorted(set(shares))
    n = _declared_count(keys, name, len(shares))
    if len(shares) != n:
        _logger.info("%s: declared n=%d, decoded %d share(s)", name, n, len(shares))
    return TestCase(name=name, k=k, n=n, shares=shares)


def load_test_case(source: os.PathLike[str] | str | Mapping[str, Any]) -> TestCase:
    """Build a :class:`TestCase` from a file path or an already parsed mapping."""
    if isinstance(source, Mapping):
        return parse_test_case(source)
    return parse_test_case(_read_document(source), name=Path(source).stem)


def solve_test_case(case: TestCase, modulus: int) -> Optional[int]:
    """Return the elected secret, or ``None`` when the case has to be skipped."""
    try:
        secret = find_actual_secret(case.shares, case.k, modulus)
    except (InsufficientShares, NoConsensus) as exc:
        _logger.warning("skipping %s: %s", case.name, exc)
        TESTCASES.labels("skipped").inc()
        return None
    TESTCASES.labels("solved").inc()
    return secret


def run_test_cases(sources: Iterable[os.PathLike[str] | str], modulus: int) -> list[TestCaseResult]:
    """Solve every readable test case; skipped cases produce no result."""
    results: list[TestCaseResult] = []
    for source in sources:
        try:
            case = load_test_case(source)
        except (OSError, UnicodeDecodeError, yaml.YAMLError, TestCaseFormatError) as exc:
            _logger.error("cannot load %s: %s", source, exc)
            TESTCASES.labels("skipped").inc()
            continue
        secret = solve_test_case(case, modulus)
        if secret is not None:
            results.append(TestCaseResult(case.name, secret))
    return results


__all__ = [
    "TestCase",
    "TestCaseResult",
    "parse_test_case",
    "load_test_case",
    "solve_test_case",
    "run_test_cases",
    "TESTCASES",
]
