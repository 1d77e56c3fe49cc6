"""Anchor tree construction."""

from __future__ import annotations

from typing import Iterable, Sequence

from markview.schemas import Anchor, AnchorNode


def build_anchor_tree(anchors: Iterable[Anchor]) -> list[AnchorNode]:
    """Group a flat, document-ordered anchor list into a forest.

    An anchor becomes a new root when the forest is empty or its level is not
    deeper than the first root's level. Every other anchor is attached to the
    most recent root, so nesting is only ever one level deep: ``h1, h2, h3``
    gives one ``h1`` root with ``h2`` and ``h3`` as sibling children.
    """
    forest: list[AnchorNode] = []
    for anchor in anchors:
        node = AnchorNode.from_anchor(anchor)
        if not forest or anchor.level <= forest[0].level:
            forest.append(node)
        else:
            forest[-1].children.append(node)
    return forest


class AnchorTreeCache:
    """Memoized anchor forest, rebuilt only when the flat list changes."""

    def __init__(self) -> None:
        self._key: tuple[Anchor, ...] | None = None
        self._forest: list[AnchorNode] = []

    def get(self, anchors: Sequence[Anchor]) -> list[AnchorNode]:
        key = tuple(anchors)
        if key != self._key:
            self._forest = build_anchor_tree(key)
            self._key = key
        return [node.model_copy(deep=True) for node in self._forest]

