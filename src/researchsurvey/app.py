"""
FastAPI application factory and main app configuration.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from researchsurvey.api.errors import register_exception_handlers
from researchsurvey.api.routers import answers, health, questions, researches
from researchsurvey.core.config import get_settings
from researchsurvey.core.logging import configure_logging

logger = logging.getLogger("researchsurvey")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    logger.info("Starting %s v%s", settings.app_name, settings.app_version)
    logger.info("Environment: %s, debug: %s", settings.app_env, settings.debug)

    # Initialize database connection (MongoDB + Beanie)
    try:
        from beanie import init_beanie
        from motor.motor_asyncio import AsyncIOMotorClient

        from researchsurvey.adapters.db.mongo.models.research_m import DOCUMENT_MODELS

        client = AsyncIOMotorClient(settings.database.uri)
        await init_beanie(
            database=client[settings.database.db_name],
            document_models=DOCUMENT_MODELS,
        )
        logger.info("MongoDB/Beanie initialized")
    except Exception:
        logger.warning("Skipping MongoDB init", exc_info=True)

    yield

    logger.info("Shutting down %s", settings.app_name)


def create_app(init_database: bool = True) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    configure_logging(settings.logging)

    app = FastAPI(
        title=settings.app_name,
        description="Research answer submission and vote summaries",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan if init_database else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allowed_methods,
        allow_headers=settings.cors.allowed_headers,
    )

    # Include routers
    app.include_router(health.router)
    app.include_router(researches.router)
    app.include_router(questions.router)
    app.include_router(answers.router)

    register_exception_handlers(app)

    return app


# Create the app instance
app = create_app()
