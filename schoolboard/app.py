from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from schoolboard.core.config import get_settings
from schoolboard.core.errors import register_error_handlers
from schoolboard.core.logging import setup_logging
from schoolboard.repositories import json_storage
from schoolboard.routers import board as board_router
from schoolboard.routers import pages as pages_router
from schoolboard.services.board_service import BoardService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level)
    json_storage.ensure_initialized()
    logger.info("Data initialized")
    logger.info("Server running at http://localhost:%s", settings.port)
    logger.info("Faculty code format: 222p-1a, 222p-2b, etc.")
    logger.info("Student code format: 222p-1a-10, 222p-2b-15, etc.")
    yield


def create_app() -> FastAPI:
    """Factory compatible with uvicorn/gunicorn."""
    settings = get_settings()
    app = FastAPI(title="School Board API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.state.board_service = BoardService(timezone=settings.timezone)
    app.include_router(board_router.router)
    app.include_router(pages_router.router)
    return app


app = create_app()
