"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from supabase import PostgrestAPIError

from dinner_planner.api.households import router as households_router
from dinner_planner.api.meals import router as meals_router
from dinner_planner.api.plans import router as plans_router
from dinner_planner.app_logging import configure_logging
from dinner_planner.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(meals_router)
    app.include_router(plans_router)
    app.include_router(households_router)

    @app.exception_handler(RuntimeError)
    @app.exception_handler(PostgrestAPIError)
    async def storage_failure(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Storage failure: %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Storage unavailable, changes were not saved"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
