"""Process-wide dark mode flag and the code highlighting stylesheets it selects."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from pygments.formatters import HtmlFormatter
from pygments.util import ClassNotFound

from markview.config import (
    MARKVIEW_CODE_SCOPE,
    MARKVIEW_DARK_MODE,
    MARKVIEW_DARK_STYLE,
    MARKVIEW_LIGHT_STYLE,
)
from markview.exceptions import ThemeError

logger = logging.getLogger(__name__)

Listener = Callable[[bool], None]


@dataclass
class Stylesheet:
    """A highlighter stylesheet that can be switched off without removing it."""

    kind: str
    style: str
    css: str
    disabled: bool = False

    def to_tag(self) -> str:
        media = ' media="not all"' if self.disabled else ""
        return f'<style data-type="{self.kind}"{media}>\n{self.css}\n</style>'


def build_stylesheet(kind: str, style: str, scope: str = MARKVIEW_CODE_SCOPE) -> Stylesheet:
    """Create the CSS for a pygments style, scoped to code blocks.

    Raises:
        ThemeError: If pygments has no style called ``style``.
    """
    try:
        css = HtmlFormatter(style=style).get_style_defs(scope)
    except ClassNotFound as exc:
        raise ThemeError(f"Unknown highlighter style: {style!r}") from exc
    return Stylesheet(kind=kind, style=style, css=css)


class DarkModeFlag:
    """Boolean that notifies listeners whenever its value changes."""

    def __init__(self, value: bool = False) -> None:
        self._value = value
        self._listeners: list[Listener] = []

    def __bool__(self) -> bool:
        return self._value

    @property
    def value(self) -> bool:
        return self._value

    def set(self, value: bool) -> None:
        if value == self._value:
            return
        self._value = value
        for listener in list(self._listeners):
            listener(value)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable removes it again."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe


class ThemeStylesheets:
    """The light and dark stylesheets, exactly one of which is enabled."""

    def __init__(self, light: Stylesheet, dark: Stylesheet) -> None:
        self.light = light
        self.dark = dark

    def apply(self, dark_mode: bool) -> None:
        self.light.disabled = dark_mode
        self.dark.disabled = not dark_mode
        logger.debug("Code theme switched to %s", self.dark.style if dark_mode else self.light.style)

    def active(self) -> Stylesheet:
        return self.light if self.dark.disabled else self.dark

    def style_tags(self) -> str:
        return "\n".join([self.light.to_tag(), self.dark.to_tag()])


dark_mode_flag = DarkModeFlag(MARKVIEW_DARK_MODE)
_stylesheets: ThemeStylesheets | None = None


def init_stylesheets(
    light_style: str = MARKVIEW_LIGHT_STYLE,
    dark_style: str = MARKVIEW_DARK_STYLE,
) -> ThemeStylesheets:
    """Create both stylesheets once and keep them in step with the flag.

    Later calls return the existing stylesheets unchanged.
    """
    global _stylesheets
    if _stylesheets is not None:
        return _stylesheets
    stylesheets = ThemeStylesheets(
        light=build_stylesheet("code-light", light_style),
        dark=build_stylesheet("code-dark", dark_style),
    )
    stylesheets.apply(dark_mode_flag.value)
    dark_mode_flag.subscribe(stylesheets.apply)
    _stylesheets = stylesheets
    return stylesheets


def set_dark_mode(value: bool) -> None:
    dark_mode_flag.set(value)


def is_dark_mode() -> bool:
    return dark_mode_flag.value


def active_css() -> str:
    """Return the CSS of the currently enabled stylesheet."""
    return init_stylesheets().active().css


def style_tags() -> str:
    """Return both stylesheets as ``<style>`` tags, the inactive one media-disabled."""
    return init_stylesheets().style_tags()
