"""Shared schemas for markview."""

from markview.schemas.anchors import Anchor, AnchorNode
from markview.schemas.conversion import ConversionRequest, ConversionResult

__all__ = ["Anchor", "AnchorNode", "ConversionRequest", "ConversionResult"]
