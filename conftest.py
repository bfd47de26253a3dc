# SPDX-FileCopyrightText: 2025 sharesplit contributors
# SPDX-License-Identifier: MIT
#
# conftest.py: lets the test suite run from an uninstalled checkout.

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))  # so sharesplit imports without installing
