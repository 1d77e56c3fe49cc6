"""Tests for summaries, outlines and TOC markup."""

from __future__ import annotations

from bs4 import BeautifulSoup

from markview.output_formatter import (
    count_anchors,
    format_anchor_tree,
    format_summary,
    render_toc_html,
)
from markview.schemas import AnchorNode, ConversionResult


def _forest() -> list[AnchorNode]:
    return [
        AnchorNode(
            title="Guide",
            href="#guide",
            level=1,
            children=[
                AnchorNode(title="Install", href="#install", level=2),
                AnchorNode(title="Usage", href="#usage", level=2),
            ],
        ),
        AnchorNode(title="FAQ", href="#faq", level=1),
    ]


def test_count_anchors() -> None:
    assert count_anchors(_forest()) == 4
    assert count_anchors([]) == 0


def test_format_anchor_tree() -> None:
    assert format_anchor_tree(_forest()) == (
        "Sections:\n"
        "- Guide (#guide)\n"
        "  - Install (#install)\n"
        "  - Usage (#usage)\n"
        "- FAQ (#faq)"
    )


def test_render_toc_html_nests_lists() -> None:
    soup = BeautifulSoup(render_toc_html(_forest()), "html.parser")

    top = soup.find("ul", class_="toc")
    items = top.find_all("li", recursive=False)
    assert [item.a["href"] for item in items] == ["#guide", "#faq"]
    assert [a.get_text() for a in items[0].ul.find_all("a")] == ["Install", "Usage"]


def test_render_toc_html_empty() -> None:
    assert render_toc_html([]) == ""


def test_format_summary() -> None:
    result = ConversionResult(html="<p>x</p>", anchors=_forest(), is_markdown=True, dark_mode=True)
    summary = format_summary(result, name_hint="guide.md")

    assert summary.splitlines() == [
        "Source: guide.md",
        "Mode: markdown",
        "Anchors: 4",
        "HTML characters: 8",
        "Theme: dark",
    ]


def test_format_summary_code_listing() -> None:
    result = ConversionResult(html="", is_markdown=False)
    assert "Mode: code listing" in format_summary(result)
