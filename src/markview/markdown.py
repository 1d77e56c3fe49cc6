"""Convert markdown, or source code wrapped as a listing, to HTML."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import NamedTuple

import mistune
from mistune.toc import add_toc_hook

from markview.code_blocks import render_code
from markview.config import MARKVIEW_DEFAULT_NAME_HINT, MARKVIEW_ESCAPE_HTML
from markview.headings import slugify_heading
from markview.links import render_link

# Pasted text often starts with a byte order mark or zero-width character.
_LEADING_INVISIBLE_RE = re.compile(r"^[\u200B-\u200F\uFEFF]")
_BACKTICK_RUN_RE = re.compile(r"`+")
_TILDE_RUN_RE = re.compile(r"~+")
_PLUGINS = ["table", "strikethrough", "url", "task_lists"]
_LANGUAGE_ALIASES = {"vue": "html"}


class ConvertedMarkdown(NamedTuple):
    """Parser output before heading post-processing."""

    html: str
    is_markdown: bool
    lang: str


class MarkviewRenderer(mistune.HTMLRenderer):
    """HTML renderer with markview code blocks and links."""

    def block_code(self, code: str, info: str | None = None) -> str:
        return render_code(code, info or "")

    def link(self, text: str, url: str, title: str | None = None) -> str:
        return render_link(self.safe_url(url), title, text)


def _heading_id(token: dict, index: int) -> str:
    return slugify_heading(token["text"])


@lru_cache(maxsize=2)
def get_markdown_parser(escape_html: bool = MARKVIEW_ESCAPE_HTML) -> mistune.Markdown:
    """Return a shared parser instance for the given escaping mode."""
    md = mistune.create_markdown(
        renderer=MarkviewRenderer(escape=escape_html),
        plugins=_PLUGINS,
    )
    add_toc_hook(md, min_level=1, max_level=6, heading_id=_heading_id)
    return md


def language_from_name(name_hint: str) -> str:
    """Return the highlighting language implied by a file name.

    The last dot-delimited segment is used; names without a dot give ``""``.
    """
    if "." not in name_hint:
        return ""
    lang = name_hint.rsplit(".", 1)[1]
    return _LANGUAGE_ALIASES.get(lang.lower(), lang)


def wrap_as_listing(text: str, lang: str) -> str:
    """Wrap text in a fenced code block that no fence run in it can close.

    Backtick fences cannot carry a backtick in their info string, so such a
    language gets a tilde fence instead. A text already ending in a newline
    gets no extra one before the closing fence, so it shows no phantom empty
    last line.
    """
    fence_char = "~" if "`" in lang else "`"
    run_re = _TILDE_RUN_RE if fence_char == "~" else _BACKTICK_RUN_RE
    longest = max((len(run) for run in run_re.findall(text)), default=0)
    fence = fence_char * max(3, longest + 1)
    separator = "" if text.endswith("\n") else "\n"
    return f"{fence}{lang}\n{text}{separator}{fence}"


def convert(
    raw: str,
    name_hint: str = MARKVIEW_DEFAULT_NAME_HINT,
    *,
    escape_html: bool = MARKVIEW_ESCAPE_HTML,
) -> ConvertedMarkdown:
    """Render ``raw`` to HTML.

    Markdown is chosen when the name hint's extension is ``md`` (any case);
    anything else is rendered as one highlighted code listing.

    Args:
        raw: Source text.
        name_hint: File name or pseudo-extension such as ``".ts"``.
        escape_html: Escape raw HTML found in markdown source.

    Returns:
        The HTML, whether markdown mode was used, and the detected language.
        Empty input gives empty HTML without invoking the parser.
    """
    lang = language_from_name(name_hint)
    is_markdown = lang.lower() == "md"
    if not raw:
        return ConvertedMarkdown(html="", is_markdown=is_markdown, lang=lang)

    text = _LEADING_INVISIBLE_RE.sub("", raw, count=1)
    source = text if is_markdown else wrap_as_listing(text, lang)
    html = get_markdown_parser(escape_html)(source)
    return ConvertedMarkdown(html=html, is_markdown=is_markdown, lang=lang)
