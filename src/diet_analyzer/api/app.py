"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from diet_analyzer.api.analyze import router as analyze_router
from diet_analyzer.app_logging import configure_logging
from diet_analyzer.containers import AppContainer
from diet_analyzer.errors import InputError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(logging.DEBUG if container.settings.debug else logging.INFO)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(analyze_router)

    @app.exception_handler(InputError)
    async def input_error_handler(request: Request, exc: InputError) -> JSONResponse:
        logger.info("Rejected analysis request: %s", exc.errors)
        return JSONResponse(
            status_code=422,
            content={"message": str(exc), "errors": exc.errors},
        )

    return app
