"""Load source files as conversion requests."""

from __future__ import annotations

from pathlib import Path

from markview.exceptions import SourceError, SourceNotFoundError
from markview.schemas import ConversionRequest


def read_source(path: Path | str, encoding: str = "utf-8") -> ConversionRequest:
    """Read a file and use its name as the name hint.

    Raises:
        SourceNotFoundError: If ``path`` is not a file.
        SourceError: If the file cannot be read or decoded.
    """
    path = Path(path)
    if not path.is_file():
        raise SourceNotFoundError(f"Source file not found: {path}")
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceError(f"Failed to read {path}: {exc}") from exc
    return ConversionRequest(text=text, name_hint=path.name)
