"""Pydantic models for the render API."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field, field_validator

from markview.config import MARKVIEW_DEFAULT_NAME_HINT
from markview.schemas import Anchor, AnchorNode
from server.server_config import MAX_TEXT_SIZE


class RenderRequest(BaseModel):
    """Request model for the /api/render endpoint.

    Attributes
    ----------
    text : str
        Markdown or source code to render.
    name_hint : str
        File name whose extension selects markdown or code listing mode.
    include_toc : bool
        Prepend a table of contents to the rendered HTML.

    """

    text: str = Field(..., max_length=MAX_TEXT_SIZE, description="Source text to render")
    name_hint: str = Field(default=MARKVIEW_DEFAULT_NAME_HINT, description="File name or extension")
    include_toc: bool = Field(default=False, description="Prepend a table of contents")

    @field_validator("name_hint")
    @classmethod
    def normalize_name_hint(cls, v: str) -> str:
        """Fall back to the default hint when ``name_hint`` is blank."""
        return v.strip() or MARKVIEW_DEFAULT_NAME_HINT


class RenderSuccessResponse(BaseModel):
    """Success response model for the /api/render endpoint.

    Attributes
    ----------
    html : str
        Rendered HTML.
    anchors : list[AnchorNode]
        Anchor forest for a table of contents.
    flat_anchors : list[Anchor]
        Anchors in document order.
    is_markdown : bool
        False when the text was rendered as a code listing.
    dark_mode : bool
        Current dark mode flag.
    summary : str
        Short human-readable description of the render.
    sections_tree : str
        Text outline of the anchor forest.

    """

    html: str = Field(..., description="Rendered HTML")
    anchors: list[AnchorNode] = Field(default_factory=list, description="Anchor forest")
    flat_anchors: list[Anchor] = Field(default_factory=list, description="Anchors in document order")
    is_markdown: bool = Field(..., description="Whether markdown mode was used")
    dark_mode: bool = Field(..., description="Dark mode flag")
    summary: str = Field(..., description="Render summary")
    sections_tree: str = Field(..., description="Text outline of the anchors")


class RenderErrorResponse(BaseModel):
    """Error response model for the /api/render endpoint.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")


# Union type for API responses
RenderResponse = Union[RenderSuccessResponse, RenderErrorResponse]


class ThemeRequest(BaseModel):
    """Request body for switching the code theme."""

    dark: bool = Field(..., description="Enable the dark code theme")


class ThemeResponse(BaseModel):
    """Current code theme."""

    dark: bool = Field(..., description="Dark mode flag")
    style: str = Field(..., description="Name of the active highlighter style")
