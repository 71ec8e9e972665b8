"""Shared fixtures for the test suite."""
from __future__ import annotations

import json

import pytest

from sharequorum import Share

@pytest.fixture
def toy_shares() -> list[Share]:
    # f(x) = 5 + 3x mod 17, the share at x=4 is corrupted (f(4) = 0)
    return [Share(1, 8), Share(2, 11), Share(3, 14), Share(4, 2)]


@pytest.fixture
def write_case(tmp_path):
    def _write(name: str, document) -> str:
        path = tmp_path / f"{name}.json"
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return str(path)

    return _write
