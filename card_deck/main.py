"""
FastAPI application entry point for the Card Deck API.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from card_deck import __version__
from card_deck.api.errors import setup_error_handlers
from card_deck.api.schemas import HealthCheckResponse
from card_deck.api.v1 import v1_router
from card_deck.infra.assets.card_presenter import CardPresenter
from card_deck.infra.config.database import (
    create_engine,
    create_session_factory,
    init_models,
)
from card_deck.infra.config.logging_config import get_logger, setup_logging
from card_deck.infra.config.settings import Settings, get_settings
from card_deck.infra.middleware.request_context import RequestContextMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    # Startup
    setup_logging(settings)
    logger = get_logger("app")
    logger.info(
        "app.startup",
        app_name=settings.app_name,
        environment=settings.environment,
    )

    engine = create_engine(settings)
    await init_models(engine)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    logger.info("database.initialized")

    yield

    # Shutdown
    await engine.dispose()
    logger.info("app.shutdown", app_name=settings.app_name)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Virtual deck of playing cards with a draw pile and a discard pile",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.card_presenter = CardPresenter(
        asset_url=settings.get_asset_url(),
        default_locale=settings.default_locale,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request context + logging middleware
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    # Include routers
    app.include_router(v1_router, prefix="/api")

    @app.get("/", response_model=HealthCheckResponse)
    async def root():
        """Health check endpoint."""
        return HealthCheckResponse(
            status="healthy", service=settings.app_name, version=__version__
        )

    @app.get("/health", response_model=HealthCheckResponse)
    async def health_check():
        """Detailed health check endpoint, including the database."""
        try:
            async with app.state.session_factory() as session:
                await session.execute(text("SELECT 1"))
            database = "ok"
        except SQLAlchemyError as exc:
            get_logger("app").warning("health.database.error", error=str(exc))
            database = "unavailable"

        return HealthCheckResponse(
            status="healthy" if database == "ok" else "degraded",
            service=settings.app_name,
            version=__version__,
            database=database,
        )

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "card_deck.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if not settings.debug else "debug",
    )
