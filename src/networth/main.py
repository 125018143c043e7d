"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from networth.app_context import AppContext
from networth.config.settings import get_settings
from networth.config.logging_config import setup_logging
from networth.repositories.sqlalchemy.database import init_db
from networth.api.routers import portfolio_router, market_router, catalog_router
from networth.core.exceptions import AppError

logger = logging.getLogger(__name__)


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """Build the application; `context` overrides the one built at startup."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        setup_logging()
        init_db()
        app.state.context = context or AppContext(get_settings())
        logger.info("Started %s", app.title)
        yield
        app.state.context.close()

    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Multi-currency investment tracking with cached market prices",
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.include_router(portfolio_router)
    app.include_router(market_router)
    app.include_router(catalog_router)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        """Global handler for application errors."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.code, "message": exc.message},
        )

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/")
    def root() -> dict[str, str]:
        """Root endpoint with API info."""
        return {
            "app": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
        }

    return app


app = create_app()
