"""Maps csvjson and framework errors onto short plain-text responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from csvjson.core.exceptions import ConversionError, FormParseError, UnsupportedFileTypeError

logger = logging.getLogger(__name__)

FORM_PARSE_MESSAGE = "Error parsing form"
UNSUPPORTED_TYPE_MESSAGE = "Please upload a CSV file"


async def _http_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    detail = str(exc.detail)
    if exc.status_code == status.HTTP_400_BAD_REQUEST:
        # raised by the framework when the request body cannot be decoded
        logger.warning("Unreadable body on %s %s: %s", request.method, request.url.path, detail)
        detail = FORM_PARSE_MESSAGE
    return PlainTextResponse(detail, status_code=exc.status_code, headers=exc.headers)


async def _validation_error(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return PlainTextResponse(FORM_PARSE_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)


async def _form_parse_error(request: Request, exc: FormParseError) -> PlainTextResponse:
    logger.warning("Bad upload form: %s", exc)
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


async def _unsupported_type(request: Request, exc: UnsupportedFileTypeError) -> PlainTextResponse:
    logger.warning("Rejected upload %r: not a .csv file", exc.filename)
    return PlainTextResponse(UNSUPPORTED_TYPE_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)


async def _conversion_error(request: Request, exc: ConversionError) -> PlainTextResponse:
    logger.warning("Conversion failed: %s", exc)
    return PlainTextResponse(f"Conversion error: {exc}", status_code=status.HTTP_400_BAD_REQUEST)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(FormParseError, _form_parse_error)
    app.add_exception_handler(UnsupportedFileTypeError, _unsupported_type)
    app.add_exception_handler(ConversionError, _conversion_error)
