# SPDX-FileCopyrightText: 2025 sharequorum contributors
# SPDX-License-Identifier: MIT
#
# conftest.py — test environment:
#   • src/ on sys.path so tests run without an editable install
#   • SHAREQUORUM_* variables cleared so the default configuration applies

from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))

for _name in ("SHAREQUORUM_MODULUS", "SHAREQUORUM_LOG_LEVEL"):
    os.environ.pop(_name, None)
