"""FastAPI application entry point."""
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from api.routers import bookmarks, health
from core.config import get_settings
from db import seed
from db.store import BookmarkStore
from services.exceptions import NotFoundError, ValidationError


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan - create (and seed) the bookmark store."""
    store = BookmarkStore()
    if get_settings().seed_bookmarks:
        seed.populate(store)
    app.state.store = store

    yield

    store.clear()


SECURITY_HEADERS = {
    # HTTPS only for a year, subdomains included
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Stamp SECURITY_HEADERS onto every response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        """Pass the request through, then add the headers."""
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers[name] = value
        return response


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten FastAPI validation errors into one readable message."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(messages) or "Invalid request"


app_settings = get_settings()

app = FastAPI(
    title="MarkIt Bookmarks API",
    description="A personal bookmark manager with tagging and automatic page titles.",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(ValidationError)
async def validation_error_handler(
    _request: Request, exc: ValidationError,
) -> JSONResponse:
    """Missing or invalid bookmark input."""
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_error_handler(
    _request: Request, exc: NotFoundError,
) -> JSONResponse:
    """Unknown bookmark ID."""
    return JSONResponse(status_code=404, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    _request: Request, exc: RequestValidationError,
) -> JSONResponse:
    """Malformed JSON or ill-typed fields, reported in the same shape as other errors."""
    return JSONResponse(
        status_code=400,
        content={"error": _format_validation_errors(exc)},
    )


# Security headers middleware (runs after CORS, adds headers to responses)
app.add_middleware(SecurityHeadersMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(bookmarks.router, prefix=app_settings.api_prefix)
