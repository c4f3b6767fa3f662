import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from resume_builder.app.api.routes.auth import router as auth_router
from resume_builder.app.api.routes.public import router as public_router
from resume_builder.app.api.routes.resume import router as resume_router
from resume_builder.app.core.config import get_settings
from resume_builder.app.core.exceptions import ResumeValidationError
from resume_builder.app.core.rate_limit import ClientRateLimiter

log = logging.getLogger(__name__)


async def http_error_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Render an HTTP error as {"message": detail}, keeping its headers."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def resume_validation_error_handler(
    request: Request,
    exc: ResumeValidationError,
) -> JSONResponse:
    """Render a rejected resume payload as 400 with every failing field."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "errors": exc.errors},
    )


async def store_failure_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Collapse a persistence failure into a generic 500.

    The exception is logged with its traceback; the client only sees a
    generic message.
    """
    _msg = f"Database error while handling {request.method} {request.url.path}"
    log.exception(_msg, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application instance.

    Notes:
        1. Initialize the FastAPI application with the title "Resume Builder API".
        2. Count every request against the per-client rate limit; a caller over
           the limit gets 429.
        3. Allow the configured frontend origin through CORS.
        4. Register handlers rendering HTTP errors as {"message": ...},
           ResumeValidationError as 400 and SQLAlchemyError as a generic 500.
        5. Include the auth, resume, and public resume routers.
        6. Define a health check endpoint at "/api/health".

    """
    _msg = "Creating FastAPI application"
    log.debug(_msg)

    settings = get_settings()
    rate_limiter = ClientRateLimiter(
        settings.rate_limit,
        enabled=settings.rate_limit_enabled,
    )
    app = FastAPI(
        title="Resume Builder API",
        dependencies=[Depends(rate_limiter)],
    )
    app.state.rate_limiter = rate_limiter

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(ResumeValidationError, resume_validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_failure_handler)

    app.include_router(auth_router)
    app.include_router(resume_router)
    app.include_router(public_router)

    @app.get("/api/health")
    async def health_check():
        """Report that the API is up."""
        return {"status": "OK", "message": "Resume Builder API is running"}

    _msg = "FastAPI application created successfully"
    log.debug(_msg)
    return app


app = create_app()
