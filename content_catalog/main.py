from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from content_catalog.api.http.health import router as health_router
from content_catalog.api.http.contents import router as contents_router
from content_catalog.core.config import settings
from content_catalog.core.db import create_tables
from content_catalog.core.exceptions import CatalogError
from content_catalog.core.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Запуск и остановка приложения"""
    setup_logging(settings.log_level)
    logger.info(f"Starting {settings.app_name} {settings.app_version}")
    if settings.create_tables_on_startup:
        await create_tables()
    yield
    logger.info(f"Shutting down {settings.app_name}")


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Ответ с кодом ошибки и описанием без внутренних деталей"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        detail = exc.message if settings.debug else exc.public_message
    else:
        logger.info(f"{request.method} {request.url.path}: {exc.message}")
        detail = exc.public_message

    return JSONResponse(
        status_code=exc.status_code,
        content={"code": exc.code, "detail": detail}
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        description="Каталог контента с управлением жанрами",
        version=settings.app_version,
        lifespan=lifespan
    )

    app.add_exception_handler(CatalogError, catalog_error_handler)

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(contents_router)

    @app.get("/")
    async def root():
        """Корневой эндпоинт"""
        return {
            "message": f"{settings.app_name} API",
            "version": settings.app_version,
            "docs": "/docs",
            "health": "/health"
        }

    return app


app = create_app()
