"""FastAPI application for the back-office API."""

import uuid
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backoffice.api.auth_routes import router as auth_router
from backoffice.api.daily_stock_routes import router as daily_stock_router
from backoffice.api.garden_routes import router as garden_router
from backoffice.api.inventory_routes import router as inventory_router
from backoffice.api.menu_routes import router as menu_router
from backoffice.api.reports_routes import router as reports_router
from backoffice.api.rooms_routes import router as rooms_router
from backoffice.config import CORS_ORIGINS
from backoffice.db import init_db
from backoffice.errors import BackofficeError
from backoffice.utils.logger import bind_context, clear_context, get_logger

logger = get_logger("backoffice.api.server")


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    init_db()
    logger.info("api.startup")
    yield
    logger.info("api.shutdown")


async def _handle_backoffice_error(request: Request, exc: BackofficeError) -> JSONResponse:
    log = logger.bind(code=exc.code, status=exc.status_code)
    if exc.status_code >= 500:
        log.error("api.request.failed", error=exc.message)
    else:
        log.info("api.request.rejected", error=exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def _handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render FastAPI/pydantic body and query errors in the same shape as ValidationError."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    # loc is ("body", "record_date") / ("query", "date_filter")
    loc = [str(p) for p in first.get("loc", ()) if p not in ("body", "query", "path")]
    field = ".".join(loc) or None
    message = f"Invalid or missing field '{field}': {first.get('msg')}" if field else "Invalid request."
    return JSONResponse(
        status_code=400,
        content={"message": message, "code": "VALIDATION_ERROR", "field": field},
    )


def create_app() -> FastAPI:
    """Create the FastAPI app with all routers, CORS and error handlers."""
    app = FastAPI(title="Back Office API", lifespan=_lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.middleware("http")
    async def _request_context(request: Request, call_next: Any):
        clear_context()
        bind_context(request_id=uuid.uuid4().hex[:12], method=request.method, path=request.url.path)
        try:
            return await call_next(request)
        finally:
            clear_context()

    app.add_exception_handler(BackofficeError, _handle_backoffice_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)

    app.include_router(auth_router)
    app.include_router(daily_stock_router)
    app.include_router(inventory_router)
    app.include_router(menu_router)
    app.include_router(rooms_router)
    app.include_router(garden_router)
    app.include_router(reports_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Liveness check."""
        return {"status": "ok"}

    return app
