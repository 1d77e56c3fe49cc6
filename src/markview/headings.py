"""Heading id derivation and heading rewriting for rendered HTML."""

from __future__ import annotations

import logging
import re
from typing import NamedTuple

import emoji

from markview.config import MARKVIEW_HEADING_CLASS
from markview.schemas import Anchor

logger = logging.getLogger(__name__)

# Inner content must sit on one line; anything else is left as-is.
_HEADING_RE = re.compile(r"<h([1-6])(\s[^>]*)?>(.*?)</h\1>", re.IGNORECASE)
_ID_ATTR_RE = re.compile(r'(?<![\w-])id="([^"]*)"', re.IGNORECASE)
_WRAPPED_RE = re.compile(r"\s*<(\w+)[^>]*>(.*?)</\1>\s*", re.DOTALL)
_ELEMENT_RE = re.compile(r"<(\w+)[^>]*>(.*?)</\1>", re.DOTALL)
_TAG_RE = re.compile(r"<[!/a-z].*?>", re.IGNORECASE)
_SLUG_UNWANTED_RE = re.compile(
    r"[\u2000-\u206F\u2E00-\u2E7F\\'!\"#$%&()*+,./:;<=>?@\[\]^`{|}~]"
)
_WHITESPACE_RE = re.compile(r"\s+")
_EDGE_TRIM = " \t\n\r\f\v-"


class NormalizedHeading(NamedTuple):
    """Plain heading text and its URL-fragment id."""

    clean_text: str
    id: str


class HeadingPass(NamedTuple):
    """Rewritten HTML together with the anchors found in it."""

    html: str
    anchors: list[Anchor]


def slugify_heading(text: str) -> str:
    """Build the id the markdown parser assigns to a heading.

    Emoji survive here; ``normalize_heading`` removes them. Repeated headings
    get identical slugs.
    """
    slug = text.lower().strip()
    slug = _TAG_RE.sub("", slug)
    slug = _SLUG_UNWANTED_RE.sub("", slug)
    return re.sub(r"\s", "-", slug)


def heading_text(inner_html: str) -> str:
    """Return the visible text of a heading's inner HTML.

    A single element wrapping everything is unwrapped and its content trimmed.
    Otherwise every top-level element is removed together with its content.
    """
    wrapped = _WRAPPED_RE.fullmatch(inner_html)
    if wrapped and f"</{wrapped.group(1).lower()}" not in wrapped.group(2).lower():
        return wrapped.group(2).strip()
    return _ELEMENT_RE.sub("", inner_html)


def normalize_heading(inner_html: str, authored_id: str | None) -> NormalizedHeading:
    """Derive the plain text and canonical id for a heading.

    Args:
        inner_html: Markup between the heading's opening and closing tags.
        authored_id: Id already present on the heading, if any.

    Returns:
        The heading text and an emoji-free id. An authored id that is all
        emoji normalizes to an empty string.
    """
    clean_text = heading_text(inner_html)
    if authored_id:
        heading_id = emoji.replace_emoji(authored_id, replace="").strip(_EDGE_TRIM)
    else:
        heading_id = _WHITESPACE_RE.sub("-", clean_text.lower())
    return NormalizedHeading(clean_text=clean_text, id=heading_id)


def process_headings(html: str) -> HeadingPass:
    """Give every heading its canonical id and an inline anchor link.

    Anchors are collected in document order. Ids are not deduplicated, so
    headings with the same text share an href.
    """
    anchors: list[Anchor] = []

    def _rewrite(match: re.Match[str]) -> str:
        level = int(match.group(1))
        attrs = match.group(2) or ""
        inner = match.group(3)
        authored = _ID_ATTR_RE.search(attrs)
        heading = normalize_heading(inner, authored.group(1) if authored else None)
        anchors.append(Anchor(title=heading.clean_text, href=f"#{heading.id}", level=level))
        return _render_heading(level, _ID_ATTR_RE.sub("", attrs), heading.id, inner)

    rewritten = _HEADING_RE.sub(_rewrite, html)
    logger.debug("Collected %d heading anchors", len(anchors))
    return HeadingPass(html=rewritten, anchors=anchors)


def _render_heading(level: int, attrs: str, heading_id: str, inner: str) -> str:
    attrs = _WHITESPACE_RE.sub(" ", attrs).strip()
    opening = f"<h{level} {attrs}" if attrs else f"<h{level}"
    return (
        f'{opening} id="{heading_id}" class="{MARKVIEW_HEADING_CLASS}">'
        f'<a id="user-content-{heading_id}" name="{heading_id}" class="anchor">'
        f'<span data-type="anchor" data-hash="#{heading_id}" class="iconfont icon-pin"></span>'
        f"</a><span>{inner}</span></h{level}>"
    )
