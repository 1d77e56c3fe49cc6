"""markview: render markdown and source listings to HTML with heading anchors."""

from markview.anchors import build_anchor_tree
from markview.code_blocks import highlight_code, render_code
from markview.exceptions import (
    MarkviewError,
    SourceError,
    SourceNotFoundError,
    ThemeError,
)
from markview.headings import normalize_heading, process_headings
from markview.links import render_link
from markview.markdown import convert
from markview.output_formatter import format_anchor_tree, format_summary, render_toc_html
from markview.pipeline import RenderOptions, render_document, render_request
from markview.schemas import Anchor, AnchorNode, ConversionRequest, ConversionResult
from markview.sources import read_source
from markview.theme import dark_mode_flag, set_dark_mode

__all__ = [
    "Anchor",
    "AnchorNode",
    "ConversionRequest",
    "ConversionResult",
    "MarkviewError",
    "RenderOptions",
    "SourceError",
    "SourceNotFoundError",
    "ThemeError",
    "build_anchor_tree",
    "convert",
    "dark_mode_flag",
    "format_anchor_tree",
    "format_summary",
    "highlight_code",
    "normalize_heading",
    "process_headings",
    "read_source",
    "render_code",
    "render_document",
    "render_link",
    "render_request",
    "render_toc_html",
    "set_dark_mode",
]
