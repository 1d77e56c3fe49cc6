"""Conversion request and result models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from markview.config import MARKVIEW_DEFAULT_NAME_HINT
from markview.schemas.anchors import Anchor, AnchorNode


class ConversionRequest(BaseModel):
    """Source text plus the file name used to pick markdown or code mode.

    Attributes:
        text: Markdown or source code.
        name_hint: File name or pseudo-extension such as ``"notes.md"`` or
            ``".ts"``. Only the part after the last dot is used.
    """

    text: str
    name_hint: str = MARKVIEW_DEFAULT_NAME_HINT


class ConversionResult(BaseModel):
    """Rendered document.

    Attributes:
        html: Rendered HTML with canonical heading ids.
        anchors: Anchor forest for a table of contents.
        flat_anchors: Anchors in document order.
        is_markdown: False when the input was wrapped as a code listing.
        dark_mode: Value of the process-wide dark mode flag at render time.
    """

    html: str
    anchors: list[AnchorNode] = Field(default_factory=list)
    flat_anchors: list[Anchor] = Field(default_factory=list)
    is_markdown: bool = True
    dark_mode: bool = False
