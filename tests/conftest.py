"""Test setup for markview."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from markview.theme import dark_mode_flag  # noqa: E402


@pytest.fixture(autouse=True)
def light_mode() -> Iterator[None]:
    """Start and finish every test with the dark mode flag off."""
    dark_mode_flag.set(False)
    yield
    dark_mode_flag.set(False)
