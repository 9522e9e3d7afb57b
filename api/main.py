"""
FastAPI application factory
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from api.routes import auth, frontend, health, notebooks, organizations, runs, users
from api.errors import register_exception_handlers
from api.middleware import RequestContextMiddleware
from core.config import Settings, get_settings
from core.context import AppContext
from core.logging import setup_logging
import logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, context: Optional[AppContext] = None) -> FastAPI:
    """
    Build the application around an explicit AppContext.

    Tests pass their own context (SQLite engine, mocked upstream transport);
    uvicorn calls this with no arguments through --factory.
    """
    if context is None:
        settings = settings or get_settings()
        context = AppContext.from_settings(settings)
    settings = context.settings

    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Notebook Runner API")
        logger.info(f"Environment: {settings.ENVIRONMENT}")
        logger.info(f"Database: {context.engine.url.render_as_string(hide_password=True)}")
        context.check_configuration()

        yield

        logger.info("Shutting down Notebook Runner API")
        await context.close()

    app = FastAPI(
        title="Notebook Runner API",
        description="Trigger and monitor remote notebook runs; manage users, organizations and run bookkeeping",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(runs.router)
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(organizations.router)
    app.include_router(notebooks.router)
    # Catch-all, must stay last
    app.include_router(frontend.router)

    return app


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run("api.main:create_app", factory=True, host=_settings.API_HOST, port=_settings.PORT)
