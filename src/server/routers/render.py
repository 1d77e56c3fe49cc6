"""Render endpoint for the API."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from server.models import RenderErrorResponse, RenderRequest, RenderSuccessResponse
from server.render_processor import process_render

router = APIRouter()

COMMON_RENDER_RESPONSES: dict[int | str, dict] = {
    status.HTTP_200_OK: {"model": RenderSuccessResponse, "description": "Successful render"},
    status.HTTP_400_BAD_REQUEST: {"model": RenderErrorResponse, "description": "Render failed"},
}


@router.post("/api/render", responses=COMMON_RENDER_RESPONSES)
async def api_render(render_request: RenderRequest) -> JSONResponse:
    """Render markdown or source code and return HTML plus heading anchors.

    **Parameters**

    - **render_request** (`RenderRequest`): text, name hint and TOC flag

    **Returns**

    - **JSONResponse**: ``RenderSuccessResponse`` on success, ``RenderErrorResponse`` with status 400 otherwise

    """
    response = process_render(render_request)
    if isinstance(response, RenderErrorResponse):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=response.model_dump())
    return JSONResponse(content=response.model_dump())
