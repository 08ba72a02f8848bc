"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from memorial_tributes.api.dashboard import router as dashboard_router
from memorial_tributes.api.tributes import router as tributes_router
from memorial_tributes.api.vendors import router as vendors_router
from memorial_tributes.app_logging import configure_logging
from memorial_tributes.containers import AppContainer
from memorial_tributes.services.forms import TributeValidationError
from memorial_tributes.services.vendors import VendorValidationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Memorial Tributes", lifespan=lifespan)
    app.state.container = container

    app.include_router(tributes_router)
    app.include_router(vendors_router)
    app.include_router(dashboard_router)

    @app.exception_handler(TributeValidationError)
    @app.exception_handler(VendorValidationError)
    async def form_error(
        request: Request, exc: TributeValidationError | VendorValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422, content={"error": str(exc), "errors": exc.errors}
        )

    @app.exception_handler(ValidationError)
    async def payload_error(request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning(
            "Rejected invalid payload",
            extra={"path": request.url.path, "error_count": exc.error_count()},
        )
        return JSONResponse(
            status_code=422,
            content={"error": f"Invalid payload: {exc.error_count()} field error(s)"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
