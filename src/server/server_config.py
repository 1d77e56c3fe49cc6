"""Server configuration."""

from __future__ import annotations

import os

DEFAULT_MAX_TEXT_SIZE = 1_000_000

# Largest source text accepted by /api/render, in characters.
MAX_TEXT_SIZE = int(os.getenv("MAX_TEXT_SIZE", str(DEFAULT_MAX_TEXT_SIZE)))
