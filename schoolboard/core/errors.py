"""
Error taxonomy for the board API and the FastAPI handlers that render it.

Every error reaches the client as {"error": "<message>"}.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class BoardError(Exception):
    """Base exception for board use cases."""

    http_status = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": self.message}


class ValidationError(BoardError):
    """Raised when a required field is missing or has an invalid value."""

    http_status = 400


class PersistenceReadError(BoardError):
    """Raised when the data file cannot be read or parsed."""


class DocumentSchemaError(BoardError):
    """Raised when the data file parses but does not hold a board document."""


class PersistenceWriteError(BoardError):
    """Raised when the data file cannot be written."""


class NotFound(BoardError):
    """Raised when a static page is absent."""

    http_status = 404


def register_error_handlers(app: FastAPI) -> None:
    """Register the JSON error handlers on the app."""

    @app.exception_handler(BoardError)
    async def board_error_handler(request: Request, exc: BoardError):
        log = logger.warning if exc.http_status < 500 else logger.error
        log("%s %s -> %s: %s", request.method, request.url.path, exc.http_status, exc.message)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning("Invalid request body on %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": "Request body must be a JSON object"})
