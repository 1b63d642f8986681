from contextlib import asynccontextmanager
from typing import Optional
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from streams_api import __version__
from streams_api.api.http import health_router, streams_router
from streams_api.core.config import Settings, get_settings
from streams_api.core.db import Database
from streams_api.core.errors import register_exception_handlers
from streams_api.core.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Открытие пула соединений при старте и закрытие при остановке"""
    settings: Settings = app.state.settings
    db = await Database.connect(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        query_timeout=settings.query_timeout,
        echo=settings.db_echo,
    )
    if settings.auto_create_schema:
        await db.create_all()
    app.state.db = db
    try:
        yield
    finally:
        await db.close()
        logger.info("Server stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Streams API",
        description="Хранение информации о записанных трансляциях",
        version=__version__,
        lifespan=lifespan
    )
    app.state.settings = settings

    # Настройка CORS для работы с frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Accept", "Content-Type"],
        max_age=300,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
        )
        return response

    register_exception_handlers(app)

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(streams_router)

    return app


def run() -> None:
    """Запуск сервера"""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Starting server on port {settings.port}")
    uvicorn.run(
        "streams_api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
