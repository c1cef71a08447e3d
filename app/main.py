"""
FastAPI application entry point.

Registers middleware (in order), routes and exception handlers.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import is_production, get_cors_origins
from app.logging_config import configure_logging
from app.middleware import (
    SecurityHeadersMiddleware,
    RequestSizeMiddleware,
    RequestIDMiddleware,
    StructuredLoggingMiddleware,
)
from app.routes.refunds import router as refunds_router
from app.routes.dashboard import router as dashboard_router


def create_app() -> FastAPI:
    configure_logging()

    docs_url = None if is_production() else "/docs"
    redoc_url = None if is_production() else "/redoc"

    application = FastAPI(
        title="Lemon Squeezy Refund Admin",
        description="Issue refunds against Lemon Squeezy orders.",
        version="1.0.0",
        docs_url=docs_url,
        redoc_url=redoc_url,
    )

    # ── Middleware stack (order matters) ────────────────────────────────────
    application.add_middleware(RequestSizeMiddleware)
    application.add_middleware(SecurityHeadersMiddleware)
    application.add_middleware(StructuredLoggingMiddleware)
    application.add_middleware(RequestIDMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "X-Request-ID"],
    )

    # ── Routes ──────────────────────────────────────────────────────────────
    application.include_router(refunds_router)
    application.include_router(dashboard_router)

    # ── Exception handlers ───────────────────────────────────────────────────
    @application.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Malformed bodies get the same {success, message} shape as every refund outcome."""
        errors = exc.errors()
        if errors:
            field = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
            detail = errors[0].get("msg", "invalid value")
            message = f"Invalid request: {field}: {detail}" if field else f"Invalid request: {detail}"
        else:
            message = "Invalid request"
        return JSONResponse(status_code=400, content={"success": False, "message": message})

    @application.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        """Never leak stack traces to clients."""
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Internal server error"},
        )

    return application


app = create_app()
