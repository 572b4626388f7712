from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text

from campus_api.config import settings
from campus_api.db.session import create_tables, shutdown
from campus_api.dependencies import DB
from campus_api.exceptions import DomainError, InvalidInputError, ResourceNotFoundError
from campus_api.logging import get_logger
from campus_api.middleware import RequestIDMiddleware
from campus_api.routers import building, campus
from campus_api.schemas.error import ErrorResponse

logger = get_logger(__name__)

# Domain exception kind -> HTTP status. Looked up along the exception's MRO,
# so subclasses inherit their parent's status.
STATUS_MAP: dict[type[DomainError], int] = {
    InvalidInputError: 400,
    ResourceNotFoundError: 404,
    DomainError: 400,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup creates missing tables (when enabled); shutdown closes the pool."""
    if settings.db_create_tables:
        await create_tables()
    yield
    await shutdown()


app = FastAPI(title="Campus Service", lifespan=lifespan)
app.add_middleware(RequestIDMiddleware)
app.include_router(building.router)
app.include_router(campus.router)


def status_for(exc: DomainError) -> int:
    for cls in type(exc).__mro__:
        if cls in STATUS_MAP:
            return STATUS_MAP[cls]
    return 400


def _error_response(status: int, message: str) -> JSONResponse:
    body = ErrorResponse(message=message, status=status)
    return JSONResponse(status_code=status, content=body.model_dump())


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status = status_for(exc)
    logger.warning(
        "domain_error",
        error=exc.message,
        kind=type(exc).__name__,
        status=status,
        path=request.url.path,
    )
    return _error_response(status, exc.message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the traceback and answer with a generic 500; internals never reach the client."""
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    return _error_response(500, "Internal server error")


@app.get("/health")
async def health(db: DB) -> dict[str, str]:
    """Return 200 only when the database answers a ping query."""
    await db.execute(text("SELECT 1"))
    return {"status": "ok"}
