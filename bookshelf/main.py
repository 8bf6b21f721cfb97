from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from bookshelf.core.errors import BookServiceError
from bookshelf.core.logging_config import setup_logging
from bookshelf.core.settings import get_settings
from bookshelf.db.session import engine as default_engine
from bookshelf.models import Base
from bookshelf.routers.books import router as books_router

logger = logging.getLogger(__name__)


async def _book_service_error_handler(request: Request, exc: BookServiceError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code or 400,
        content={"detail": exc.as_detail()},
    )


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """Build the HTTP application; ``engine`` defaults to the configured one."""
    settings = get_settings()
    setup_logging(settings.log_level)
    bind = engine if engine is not None else default_engine

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        Base.metadata.create_all(bind=bind)
        logger.info("Schema ready on %s", bind.url.render_as_string(hide_password=True))
        yield

    app = FastAPI(title=settings.app_title, lifespan=lifespan)
    app.add_exception_handler(BookServiceError, _book_service_error_handler)
    app.include_router(books_router)
    return app


app = create_app()
