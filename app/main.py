import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .db.migrate import apply_migrations
from .db.seed import seed_exchange_rate
from .core import errors
from .routers import health, orders, stats, rates


def create_app(settings_override: Settings | None = None) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment (e.g., temp DB). Falls back to cached get_settings().
    """
    settings = settings_override or get_settings()
    # Initialize logging early
    init_logging(debug=settings.debug)
    logger = logging.getLogger("app")

    # Ensure database schema (idempotent) so test-injected fresh DBs have tables
    try:
        apply_migrations(settings.db_path)  # type: ignore[arg-type]
    except Exception:
        # Failing to init DB is fatal; re-raise after logging
        logger.exception("failed to apply migrations on startup")
        raise

    if settings.seed_exchange_rate is not None:
        if seed_exchange_rate(settings.db_path, settings.seed_exchange_rate):  # type: ignore[arg-type]
            logger.info(
                "seeded base rate", extra={"rate": settings.seed_exchange_rate}
            )

    app = FastAPI(
        title=settings.app_name, debug=settings.debug, version=settings.version
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(errors.OrderNotFound, errors.order_not_found_handler)
    app.add_exception_handler(errors.StorageError, errors.storage_error_handler)
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(orders.router)
    app.include_router(stats.router)
    app.include_router(rates.router)

    @app.get("/")
    async def root():
        return {"message": f"{settings.app_name} is running", "version": settings.version}

    return app


app = create_app()
