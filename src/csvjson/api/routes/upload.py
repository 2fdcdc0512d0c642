"""Upload form endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from csvjson.api.templates import render_upload_form

logger = logging.getLogger(__name__)

router = APIRouter(tags=["upload"])


@router.get("/", response_class=HTMLResponse)
async def upload_form(request: Request) -> Response:
    """Return the HTML form that posts a CSV file to /convert."""
    settings = request.app.state.settings
    try:
        page = render_upload_form(max_upload_bytes=settings.server.max_upload_bytes)
    except (KeyError, ValueError):
        logger.exception("Failed to render upload form")
        return PlainTextResponse(
            "Error loading template",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return HTMLResponse(page)
