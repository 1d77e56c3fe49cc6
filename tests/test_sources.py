"""Tests for loading source files."""

from __future__ import annotations

from pathlib import Path

import pytest

from markview.exceptions import SourceError, SourceNotFoundError
from markview.sources import read_source


def test_reads_text_and_name(tmp_path: Path) -> None:
    path = tmp_path / "notes.md"
    path.write_text("# Notes\n", encoding="utf-8")

    request = read_source(path)

    assert request.text == "# Notes\n"
    assert request.name_hint == "notes.md"


def test_accepts_string_path(tmp_path: Path) -> None:
    path = tmp_path / "main.ts"
    path.write_text("let x = 1;", encoding="utf-8")
    assert read_source(str(path)).name_hint == "main.ts"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SourceNotFoundError, match="not found"):
        read_source(tmp_path / "missing.md")


def test_undecodable_file(tmp_path: Path) -> None:
    path = tmp_path / "binary.md"
    path.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(SourceError, match="Failed to read"):
        read_source(path)
