"""Heading anchor models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Anchor(BaseModel):
    """A navigable heading record."""

    model_config = ConfigDict(frozen=True)

    title: str
    href: str
    level: int = Field(..., ge=1, le=6)


class AnchorNode(BaseModel):
    """An anchor with its nested anchors."""

    title: str
    href: str
    level: int = Field(..., ge=1, le=6)
    children: list["AnchorNode"] = Field(default_factory=list)

    @classmethod
    def from_anchor(cls, anchor: Anchor) -> AnchorNode:
        return cls(title=anchor.title, href=anchor.href, level=anchor.level)
