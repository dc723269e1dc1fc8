"""
FastAPI application factory
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qanyare import __version__
from qanyare.infrastructure.configuration.config import Settings, get_config
from qanyare.infrastructure.container.dependency_injection import DependencyContainer
from qanyare.presentation.api.error_handlers import register_error_handlers
from qanyare.presentation.api.routers import api_router, health_router

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[Settings] = None,
    container: Optional[DependencyContainer] = None,
) -> FastAPI:
    """
    Build the API application.

    Storage is prepared (tables created, fixtures loaded when configured) in
    the lifespan handler, so it happens once the server starts serving.
    """
    config = config or get_config()
    container = container or DependencyContainer(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info(
            "Starting Qanyare API",
            extra={"environment": config.environment, "storage": config.storage_backend},
        )
        await container.initialize()

        yield

        # Shutdown
        container.close()
        logger.info("Qanyare API shutdown completed")

    app = FastAPI(title="Qanyare Restaurant API", version=__version__, lifespan=lifespan)
    app.state.container = container

    # Must precede CORSMiddleware, which has to wrap the logging middleware
    register_error_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    app.include_router(health_router)
    return app
