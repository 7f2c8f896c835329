"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance and wires in the
routes and lifespan events. Logging is configured at startup, by the
lifespan or by run(), never at import time.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from src.api.routes import router
from src.config.logging_setup import APP_LOGGER_NAME, setup_logging
from src.config.settings import Settings, get_settings

HOST = "0.0.0.0"
PORT = 3000

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "users",
        "description": "User creation - echoes the submitted username with a fixed identifier",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Configures logging from the stored settings. The service holds no
    resources; startup and shutdown are only logged.
    """
    settings: Settings = app.state.settings
    logger = setup_logging(settings.log_level)
    app.state.logger = logger

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Settings and the application logger are stored in app state; the root
    logger is left untouched until startup.
    """
    settings = settings or get_settings()

    application = FastAPI(
        title="my-todo",
        description="Minimal HTTP service - greeting and user creation",
        version="0.1.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.logger = logging.getLogger(APP_LOGGER_NAME)

    application.include_router(router)

    return application


app = create_app()


def run() -> None:
    """
    Serve the application on all interfaces, port 3000.

    Runs until terminated. A bind failure makes uvicorn exit the process.
    """
    settings: Settings = app.state.settings
    logger = setup_logging(settings.log_level)

    logger.debug("listening on %s:%d", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_level=settings.log_level_number)
