"""FastAPI application entry point."""

import time
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from wishlist.api import gifts, users
from wishlist.config import get_settings
from wishlist.database import init_db
from wishlist.logging_config import configure_logging, get_child_logger
from wishlist.schemas.error import ErrorResponse
from wishlist.services.errors import ErrorCode, ServiceError

settings = get_settings()
configure_logging(settings)
logger = get_child_logger("http")

STATUS_BY_CODE = {
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Frames would show which credential check raised
CREDENTIAL_ERRORS = (ErrorCode.UNAUTHORIZED, ErrorCode.FORBIDDEN)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    init_db()
    logger.info(f"Wishlist API started ({settings.environment})")
    yield


app = FastAPI(
    title="Wishlist API",
    description="Household gift wishlists with reservations",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.middleware("http")
async def request_timer(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed = time.perf_counter() - start
    response.headers["X-Process-Time"] = f"{elapsed:.4f}"
    logger.debug(f"{request.method} {request.url.path} {response.status_code} - {elapsed:.3f}s")
    return response


def error_response(
    status_code: int,
    code: ErrorCode,
    details,
    stack: list[str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(code=code.value, details=details, stack=stack)
    content = body.model_dump(exclude_none=True)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content=content, headers=headers)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    status_code = STATUS_BY_CODE.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(
            f"{request.method} {request.url.path} -> {status_code} {exc.code.value}: "
            f"{exc.message} {exc.context}"
        )
    stack = None
    if not settings.is_production and exc.code not in CREDENTIAL_ERRORS:
        # Only the service error's own frames; a chained cause may hold signing details
        stack = traceback.format_exception(exc, chain=False)
    return error_response(status_code, exc.code, exc.message, stack)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info(f"{request.method} {request.url.path} -> 400 validation failed")
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorCode.VALIDATION_FAILED,
        [
            {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
            for error in exc.errors()
        ],
    )


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"{request.method} {request.url.path} constraint violation: {exc.orig}")
    conflict = ServiceError.conflict("The request conflicts with existing data")
    return await service_error_handler(request, conflict)


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    logger.exception(f"{request.method} {request.url.path} -> 500", exc_info=exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorCode.INTERNAL,
        "Internal server error",
    )


# Register routers
app.include_router(users.router)
app.include_router(gifts.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
