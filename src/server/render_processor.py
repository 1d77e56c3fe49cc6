"""Process a render request into an API response."""

from __future__ import annotations

from markview.output_formatter import format_anchor_tree, format_summary
from markview.pipeline import RenderOptions, render_document
from markview.utils.logging_config import get_logger
from server.models import RenderErrorResponse, RenderRequest, RenderResponse, RenderSuccessResponse

# Initialize logger for this module
logger = get_logger(__name__)


def process_render(request: RenderRequest) -> RenderResponse:
    """Render the request's text and wrap the outcome in a response model."""
    options = RenderOptions(include_toc=request.include_toc)
    try:
        result = render_document(request.text, request.name_hint, options=options)
    except Exception as exc:
        logger.error("Render failed for %s: %s", request.name_hint, exc, exc_info=True)
        return RenderErrorResponse(error=f"{exc!s}")

    logger.info(
        "Rendered %s (%d chars, %d anchors)",
        request.name_hint,
        len(request.text),
        len(result.flat_anchors),
    )
    return RenderSuccessResponse(
        html=result.html,
        anchors=result.anchors,
        flat_anchors=result.flat_anchors,
        is_markdown=result.is_markdown,
        dark_mode=result.dark_mode,
        summary=format_summary(result, name_hint=request.name_hint),
        sections_tree=format_anchor_tree(result.anchors),
    )
