# server/core/errors.py

import logging
from typing import Any
from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


class APIError(HTTPException):
    """
    An HTTP failure rendered as {"success": false, "response": ..., "error": ...}.
    """

    def __init__(self, status_code: int, response: Any, error: Any = None):
        super().__init__(status_code=status_code, detail=response)
        self.error = error


def envelope(response: Any, error: Any = None) -> dict:
    body = {"success": False, "response": response}
    if error is not None:
        body["error"] = error
    return body


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    error = getattr(exc, "error", None)
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(envelope(exc.detail, error)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder(envelope("Invalid request", exc.errors())),
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
