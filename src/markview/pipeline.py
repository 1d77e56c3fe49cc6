"""Rendering pipeline: markdown conversion, heading anchors and anchor tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from markview.anchors import AnchorTreeCache
from markview.config import MARKVIEW_DEFAULT_NAME_HINT, MARKVIEW_ESCAPE_HTML
from markview.headings import process_headings
from markview.markdown import convert
from markview.output_formatter import render_toc_html
from markview.schemas import ConversionRequest, ConversionResult
from markview.theme import is_dark_mode

logger = logging.getLogger(__name__)

_tree_cache = AnchorTreeCache()


@dataclass
class RenderOptions:
    """Options for document rendering.

    Attributes:
        escape_html: If True, raw HTML in markdown source is escaped.
        include_toc: If True, prepend a ``<nav>`` table of contents built from
            the anchor tree.
    """

    escape_html: bool = MARKVIEW_ESCAPE_HTML
    include_toc: bool = False


def render_document(
    text: str,
    name_hint: str = MARKVIEW_DEFAULT_NAME_HINT,
    *,
    options: RenderOptions | None = None,
) -> ConversionResult:
    """Render text to HTML and collect its heading anchors.

    Args:
        text: Markdown, or source code when ``name_hint`` has another extension.
        name_hint: File name or pseudo-extension deciding the mode.
        options: Rendering options. Uses defaults if None.

    Returns:
        The rendered HTML, anchor forest, flat anchors, mode and the current
        dark mode flag. Empty input yields empty HTML and no anchors.
    """
    opts = options or RenderOptions()
    converted = convert(text, name_hint, escape_html=opts.escape_html)
    if not converted.html:
        return ConversionResult(
            html="",
            is_markdown=converted.is_markdown,
            dark_mode=is_dark_mode(),
        )

    heading_pass = process_headings(converted.html)
    forest = _tree_cache.get(heading_pass.anchors)
    html = heading_pass.html
    if opts.include_toc and forest:
        html = f'<nav class="toc-wrap">{render_toc_html(forest)}</nav>\n{html}'

    logger.debug(
        "Rendered %s input (%d chars) with %d anchors",
        "markdown" if converted.is_markdown else converted.lang or "plain",
        len(text),
        len(heading_pass.anchors),
    )
    return ConversionResult(
        html=html,
        anchors=forest,
        flat_anchors=heading_pass.anchors,
        is_markdown=converted.is_markdown,
        dark_mode=is_dark_mode(),
    )


def render_request(
    request: ConversionRequest, *, options: RenderOptions | None = None
) -> ConversionResult:
    """Render a ``ConversionRequest``."""
    return render_document(request.text, request.name_hint, options=options)
