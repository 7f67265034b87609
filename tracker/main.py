"""
Pillar Tracker FastAPI application entry point.

Pipeline: indicators + events → normalization → pillar scores → composite → trends
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from tracker import __version__
from tracker.config import get_settings
from tracker.db.session import check_db_connection, engine, init_db

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("Pillar Tracker starting")
    try:
        try:
            check_db_connection()
            init_db()
            logger.info("Database connection verified")
        except Exception as e:
            logger.critical("Database unreachable: %s", e)
            raise

        # Validate the weight preset table at startup so a bad deployment
        # surfaces immediately rather than at the first scoring job.
        try:
            from tracker.weights import get_preset, load_presets_file

            load_presets_file()
            get_preset(get_settings().weight_preset)
            logger.info("Weight presets validated")
        except Exception as e:
            logger.critical("Weight preset validation failed at startup: %s", e)
            raise

        yield
    finally:
        logger.info("Pillar Tracker shutting down")
        engine.dispose()
        logger.info("Database connection pool closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    from tracker.api.internal import router as internal_router
    from tracker.api.presets import router as presets_router
    from tracker.api.records import router as records_router
    from tracker.api.scores import router as scores_router

    app.include_router(scores_router, prefix="/api/scores", tags=["scores"])
    app.include_router(presets_router, prefix="/api/presets", tags=["presets"])
    app.include_router(records_router, prefix="/api", tags=["records"])

    # Internal job endpoints (cron/scripts, token-authenticated)
    app.include_router(internal_router, tags=["internal"])

    @app.get("/health")
    def health() -> dict:
        """Health check endpoint. Confirms DB connectivity."""
        from sqlalchemy import text

        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return {
                "status": "ok",
                "version": __version__,
                "database": "connected",
            }
        except Exception:
            from fastapi.responses import JSONResponse

            return JSONResponse(
                status_code=503,
                content={
                    "status": "unhealthy",
                    "version": __version__,
                    "database": "disconnected",
                },
            )

    return app


app = create_app()
