"""
FastAPI application entry point.
Challenge: Build the single Repository for the process and expose the dashboards' actions.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app

from freelancehub.api.v1.router import api_router
from freelancehub.config import get_settings
from freelancehub.core.errors import FreelanceHubError
from freelancehub.core.logging_config import setup_logging
from freelancehub.db.repositories import Repository
from freelancehub.db.store import StorageKeys, create_store

logger = logging.getLogger(__name__)


async def handle_domain_error(request: Request, exc: FreelanceHubError) -> JSONResponse:
    """Render rule failures as inline messages with the error's status code."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app(repository: Repository | None = None) -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    if repository is None:
        repository = Repository(
            create_store(settings),
            StorageKeys.with_prefix(settings.storage_key_prefix),
        )
        logger.info("Repository built from settings (storage=%s)", settings.storage_backend)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await app.state.repository.close()

    app = FastAPI(
        title=settings.app_name,
        description="Freelance marketplace: users, services and bookings over a key-value store.",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.repository = repository
    app.add_exception_handler(FreelanceHubError, handle_domain_error)

    # Prometheus metrics at /metrics
    app.mount("/metrics", make_asgi_app())

    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
