from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hotel_booking.api.v1.router import router as api_v1_router
from hotel_booking.config.logging import setup_logging
from hotel_booking.config.settings import settings
from hotel_booking.core.exception_handlers import register_exception_handlers
from hotel_booking.core.logging import get_logger
from hotel_booking.core.middleware import register_middlewares
from hotel_booking.db.init_db import init_db
from hotel_booking.db.seed import seed_room_types
from hotel_booking.db.session import SessionLocal
from hotel_booking.schemas.common.response import HealthResponse

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures title, version, debug mode from Settings.
    - Registers CORS, core middleware, and exception handlers.
    - Includes the versioned API router under /api/v1.
    """
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=settings.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Credentials cannot be combined with a wildcard origin
    allow_all = not settings.CORS_ORIGINS or settings.CORS_ORIGINS == ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.CORS_ORIGINS,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middlewares(app)
    register_exception_handlers(app)

    app.include_router(api_v1_router, prefix=settings.API_V1_STR)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    def health() -> HealthResponse:
        return HealthResponse(status="ok", version=settings.API_VERSION, environment=settings.ENVIRONMENT)

    @app.on_event("startup")
    def on_startup() -> None:
        # Schema creation for dev/demo; production schemas come from migrations
        if settings.is_production():
            return
        init_db()
        if settings.SEED_DEMO_DATA:
            with SessionLocal() as db:
                seed_room_types(db, currency=settings.CURRENCY)

    logger.info(
        f"{settings.APP_NAME} application created",
        extra={"environment": settings.ENVIRONMENT, "api_prefix": settings.API_V1_STR},
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hotel_booking.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_config=None,
    )
