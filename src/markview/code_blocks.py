"""Fenced code block rendering: highlighting, line numbers and copy control."""

from __future__ import annotations

import logging
import re
from functools import lru_cache

from mistune.util import escape
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_all_lexers, get_lexer_by_name

logger = logging.getLogger(__name__)

# A newline that closes the final line does not start another one.
_LINE_BREAK_RE = re.compile(r"\n(?!\Z)")
_BLANK_RE = re.compile(r"^\s*$")

_FORMATTER = HtmlFormatter(nowrap=True)


@lru_cache(maxsize=1)
def _grammar_names() -> frozenset[str]:
    names: set[str] = set()
    for _name, aliases, _filenames, _mimetypes in get_all_lexers():
        names.update(alias.lower() for alias in aliases)
    return frozenset(names)


def is_known_grammar(name: str) -> bool:
    """Return True if the highlighter has a grammar registered under ``name``."""
    return bool(name) and name.strip().lower() in _grammar_names()


def highlight_code(code: str, language: str = "typescript") -> str:
    """Highlight ``code`` with the named grammar and return token markup.

    The text is kept verbatim: leading and trailing newlines are not stripped
    and no final newline is added.

    Raises:
        pygments.util.ClassNotFound: If ``language`` is not registered.
    """
    lexer = get_lexer_by_name(language.strip(), stripnl=False, ensurenl=False)
    html = highlight(code, lexer, _FORMATTER)
    # The formatter closes the last line with a newline the code may not have.
    if not code.endswith("\n") and html.endswith("\n"):
        html = html[:-1]
    return html


def count_lines(code: str) -> int:
    """Count displayed lines, ignoring a trailing newline."""
    return len(_LINE_BREAK_RE.findall(code)) + 1


def language_classes(infostring: str | None) -> tuple[list[str], str]:
    """Split an info string into language tokens and their CSS class list.

    >>> language_classes("ts,js")
    (['ts', 'js'], 'language-ts language-js')
    >>> language_classes("")
    ([''], 'language-none')
    """
    langs = [lang.strip() for lang in (infostring or "").split(",")]
    if len(langs) == 1 and _BLANK_RE.match(langs[0]):
        return langs, "language-none"
    return langs, " ".join(f"language-{escape(lang)}" for lang in langs if lang)


def render_line_numbers(code: str) -> str:
    """Return the gutter markup: one empty span per displayed line."""
    rows = "<span></span>" * count_lines(code)
    return f'<span aria-hidden="true" class="line-numbers-rows">{rows}</span>'


def render_code(code: str, infostring: str | None) -> str:
    """Render a fenced code block.

    Args:
        code: Raw code text as handed over by the markdown parser.
        infostring: Text after the opening fence, possibly a comma-separated
            list of languages. The first one selects the grammar.

    Returns:
        HTML with a copy button, a ``<pre>``/``<code>`` pair carrying the
        ``language-*`` classes, and a line-number gutter after the code.
    """
    langs, classes = language_classes(infostring)
    grammar = langs[0]
    if is_known_grammar(grammar):
        body = highlight_code(code, grammar)
    else:
        if grammar:
            logger.debug("No grammar registered for %r, rendering plain code", grammar)
        body = escape(code)

    return (
        '<div class="code_wrap">'
        '<button data-type="copy">copy</button>'
        f'<pre class="line-numbers {classes}"><code class="{classes}">'
        f"{body}{render_line_numbers(code)}"
        "</code></pre></div>\n"
    )
