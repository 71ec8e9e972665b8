# SPDX-FileCopyrightText: 2025 sharequorum contributors
# SPDX-License-Identifier: MIT
"""Runtime configuration.

Values can be overridden through environment variables so that test runs and
batch jobs can switch to a small modulus without touching code. The default
modulus lives here and nowhere else; the engine itself always receives it as
an argument.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .field import MERSENNE_127

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_modulus(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        modulus = int(value, 0)
    except ValueError:
        return default
    return modulus if modulus >= 2 else default


def _load_level(name: str, default: str) -> str:
    value = os.environ.get(name)
    if not value:
        return default
    level = value.strip().upper()
    return level if level in LOG_LEVELS else default


@dataclass(frozen=True)
class RecoveryConfig:
    """Tunables shared by the CLI and the test-case driver."""

    modulus: int = MERSENNE_127
    log_level: str = "WARNING"


def load_config() -> RecoveryConfig:
    """Load the configuration considering environment overrides."""

    return RecoveryConfig(
        modulus=_load_modulus("SHAREQUORUM_MODULUS", MERSENNE_127),
        log_level=_load_level("SHAREQUORUM_LOG_LEVEL", "WARNING"),
    )


config = load_config()


__all__ = ["LOG_LEVELS", "RecoveryConfig", "config", "load_config"]
