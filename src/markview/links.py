"""Link rendering with a fixed styling hook."""

from __future__ import annotations

from markview.config import MARKVIEW_LINK_CLASS


def render_link(href: str, title: str | None, text: str) -> str:
    """Render a markdown link as an anchor tag carrying the link class.

    ``title`` is accepted for parity with the parser's link hook but is not
    emitted.
    """
    return f'<a class="{MARKVIEW_LINK_CLASS}" href="{href}">{text}</a>'
