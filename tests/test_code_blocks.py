"""Tests for fenced code block rendering."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup
from pygments.util import ClassNotFound

from markview.code_blocks import (
    count_lines,
    highlight_code,
    is_known_grammar,
    language_classes,
    render_code,
)


def _gutter_rows(html: str) -> int:
    soup = BeautifulSoup(html, "html.parser")
    return len(soup.select("span.line-numbers-rows > span"))


class TestCountLines:
    """Tests for count_lines function."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("", 1),
            ("one", 1),
            ("one\n", 1),
            ("one\ntwo", 2),
            ("one\ntwo\n", 2),
            ("one\n\n", 2),
            ("\n\n\n", 3),
        ],
    )
    def test_trailing_newline_does_not_add_a_line(self, code: str, expected: int) -> None:
        assert count_lines(code) == expected


class TestLanguageClasses:
    """Tests for language_classes function."""

    def test_single_language(self) -> None:
        assert language_classes("python") == (["python"], "language-python")

    def test_blank_info_string_is_none(self) -> None:
        assert language_classes("")[1] == "language-none"
        assert language_classes("   ")[1] == "language-none"
        assert language_classes(None)[1] == "language-none"

    def test_comma_separated_languages(self) -> None:
        langs, classes = language_classes("ts, js")
        assert langs == ["ts", "js"]
        assert classes == "language-ts language-js"

    def test_empty_tokens_are_skipped(self) -> None:
        assert language_classes("ts,,js,")[1] == "language-ts language-js"


class TestIsKnownGrammar:
    """Tests for is_known_grammar function."""

    def test_known_names(self) -> None:
        assert is_known_grammar("python")
        assert is_known_grammar("ts")
        assert is_known_grammar("TypeScript")

    def test_unknown_names(self) -> None:
        assert not is_known_grammar("no-such-grammar")
        assert not is_known_grammar("")


class TestHighlightCode:
    """Tests for highlight_code function."""

    def test_emits_token_spans(self) -> None:
        html = highlight_code("def f():\n    return 1\n", "python")
        assert '<span class="k">def</span>' in html

    def test_defaults_to_typescript(self) -> None:
        html = highlight_code("const answer: number = 42;")
        assert "<span" in html
        assert BeautifulSoup(html, "html.parser").get_text() == "const answer: number = 42;"

    def test_keeps_code_verbatim(self) -> None:
        """Leading newlines are kept and no trailing newline is added."""
        html = highlight_code("\nx = 1", "python")
        assert BeautifulSoup(html, "html.parser").get_text() == "\nx = 1"

    def test_unknown_language_raises(self) -> None:
        with pytest.raises(ClassNotFound):
            highlight_code("x", "no-such-grammar")


class TestRenderCode:
    """Tests for render_code function."""

    def test_wraps_with_copy_button(self) -> None:
        soup = BeautifulSoup(render_code("x = 1\n", "python"), "html.parser")
        wrapper = soup.find("div", class_="code_wrap")
        assert wrapper is not None
        button = wrapper.find("button")
        assert button["data-type"] == "copy"
        assert button.get_text() == "copy"

    def test_classes_on_pre_and_code(self) -> None:
        soup = BeautifulSoup(render_code("x", "ts,js"), "html.parser")
        assert soup.pre["class"] == ["line-numbers", "language-ts", "language-js"]
        assert soup.code["class"] == ["language-ts", "language-js"]

    def test_blank_language_uses_none_class(self) -> None:
        soup = BeautifulSoup(render_code("x", ""), "html.parser")
        assert soup.code["class"] == ["language-none"]

    @pytest.mark.parametrize(
        ("code", "rows"),
        [("a", 1), ("a\n", 1), ("a\nb", 2), ("a\nb\nc\n", 3), ("a\n\n", 2)],
    )
    def test_gutter_row_count(self, code: str, rows: int) -> None:
        assert _gutter_rows(render_code(code, "python")) == rows
        assert _gutter_rows(render_code(code, "")) == rows

    def test_gutter_follows_code(self) -> None:
        soup = BeautifulSoup(render_code("a\nb", "python"), "html.parser")
        children = [child for child in soup.code.children if getattr(child, "name", None)]
        assert children[-1]["class"] == ["line-numbers-rows"]
        assert children[-1]["aria-hidden"] == "true"

    @pytest.mark.parametrize("code", ["a\nb", "a\nb\n", "\nx = 1", "x = 1\n\n"])
    @pytest.mark.parametrize("infostring", ["python", "typescript", ""])
    def test_code_text_matches_input(self, code: str, infostring: str) -> None:
        """The listing shows exactly the input, so it lines up with the gutter."""
        soup = BeautifulSoup(render_code(code, infostring), "html.parser")
        soup.find("span", class_="line-numbers-rows").decompose()
        assert soup.code.get_text() == code

    def test_known_grammar_is_highlighted(self) -> None:
        html = render_code("def f(): pass\n", "python")
        assert '<span class="k">def</span>' in html

    def test_unknown_grammar_is_escaped_plain_text(self) -> None:
        html = render_code("<b>hi</b>\n", "no-such-grammar")
        assert "&lt;b&gt;hi&lt;/b&gt;" in html
        assert "<b>" not in html

    def test_first_language_selects_grammar(self) -> None:
        html = render_code("def f(): pass", "no-such-grammar,python")
        assert '<span class="k">' not in html
