"""Format rendered documents into summaries, outlines and TOC markup."""

from __future__ import annotations

from typing import Iterable, Sequence

from markview.schemas import AnchorNode, ConversionResult


def format_summary(result: ConversionResult, *, name_hint: str | None = None) -> str:
    """Create a short summary of a rendered document."""
    summary_lines = []
    if name_hint:
        summary_lines.append(f"Source: {name_hint}")
    summary_lines.append(f"Mode: {'markdown' if result.is_markdown else 'code listing'}")
    summary_lines.append(f"Anchors: {count_anchors(result.anchors)}")
    summary_lines.append(f"HTML characters: {len(result.html)}")
    summary_lines.append(f"Theme: {'dark' if result.dark_mode else 'light'}")
    return "\n".join(summary_lines)


def count_anchors(nodes: Iterable[AnchorNode]) -> int:
    """Count total anchors in the forest."""
    total = 0
    for node in nodes:
        total += 1
        total += count_anchors(node.children)
    return total


def format_anchor_tree(nodes: Sequence[AnchorNode]) -> str:
    """Render the forest as an indented text outline."""
    lines = ["Sections:"]

    def _walk(items: Sequence[AnchorNode], depth: int) -> None:
        for node in items:
            lines.append(f"{'  ' * depth}- {node.title} ({node.href})")
            _walk(node.children, depth + 1)

    _walk(nodes, 0)
    return "\n".join(lines)


def render_toc_html(nodes: Sequence[AnchorNode]) -> str:
    """Render the anchor forest as nested ``<ul class="toc">`` lists."""
    if not nodes:
        return ""
    items = []
    for node in nodes:
        children = render_toc_html(node.children)
        items.append(f'<li><a href="{node.href}">{node.title}</a>{children}</li>')
    return f'<ul class="toc">{"".join(items)}</ul>'
