"""Local configuration for markview."""

from __future__ import annotations

import os

DEFAULT_NAME_HINT = ".md"
DEFAULT_HEADING_CLASS = "markview-heading"
DEFAULT_LINK_CLASS = "markview-link"
DEFAULT_LIGHT_STYLE = "solarized-light"
DEFAULT_DARK_STYLE = "monokai"
DEFAULT_CODE_SCOPE = ".code_wrap"
DEFAULT_LOG_LEVEL = "INFO"


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).strip().lower() in {"1", "true", "yes", "on"}


# Name hint used when the caller does not supply one; only its extension matters.
MARKVIEW_DEFAULT_NAME_HINT = os.getenv("MARKVIEW_DEFAULT_NAME_HINT", DEFAULT_NAME_HINT)
MARKVIEW_HEADING_CLASS = os.getenv("MARKVIEW_HEADING_CLASS", DEFAULT_HEADING_CLASS)
MARKVIEW_LINK_CLASS = os.getenv("MARKVIEW_LINK_CLASS", DEFAULT_LINK_CLASS)
# Escape raw HTML embedded in markdown source.
MARKVIEW_ESCAPE_HTML = _env_flag("MARKVIEW_ESCAPE_HTML", True)
MARKVIEW_LIGHT_STYLE = os.getenv("MARKVIEW_LIGHT_STYLE", DEFAULT_LIGHT_STYLE)
MARKVIEW_DARK_STYLE = os.getenv("MARKVIEW_DARK_STYLE", DEFAULT_DARK_STYLE)
MARKVIEW_DARK_MODE = _env_flag("MARKVIEW_DARK_MODE", False)
MARKVIEW_CODE_SCOPE = os.getenv("MARKVIEW_CODE_SCOPE", DEFAULT_CODE_SCOPE)
MARKVIEW_LOG_LEVEL = os.getenv("MARKVIEW_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
