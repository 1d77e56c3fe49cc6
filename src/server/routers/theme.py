"""Code theme endpoints for the API."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from markview.theme import active_css, init_stylesheets, is_dark_mode, set_dark_mode
from server.models import ThemeRequest, ThemeResponse

router = APIRouter()


def _current_theme() -> ThemeResponse:
    return ThemeResponse(dark=is_dark_mode(), style=init_stylesheets().active().style)


@router.get("/api/theme", response_model=ThemeResponse)
async def get_theme() -> ThemeResponse:
    """Return the dark mode flag and the active highlighter style."""
    return _current_theme()


@router.post("/api/theme", response_model=ThemeResponse)
async def update_theme(theme_request: ThemeRequest) -> ThemeResponse:
    """Switch the code theme between light and dark."""
    init_stylesheets()
    set_dark_mode(theme_request.dark)
    return _current_theme()


@router.get("/api/theme.css", response_class=PlainTextResponse)
async def theme_css() -> PlainTextResponse:
    """Return the CSS for the active code theme."""
    return PlainTextResponse(active_css(), media_type="text/css")
