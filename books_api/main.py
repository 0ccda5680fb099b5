# books_api/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .catalog import BookRegistry, catalog_router
from .catalog.store import MISSING_FIELDS_MESSAGE, NOTHING_TO_UPDATE_MESSAGE
from .config import settings


logger = logging.getLogger(__name__)

UNMATCHED_ROUTE_MESSAGE = "Not found"


def configure_logging() -> None:
    # basicConfig is a no-op once the root logger has handlers, so this is safe
    # under `run()` as well as under `uvicorn books_api.main:app`.
    logging.basicConfig(level=logging.INFO, format=settings.log_format)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Books API listening at %s", settings.base_url)
    yield


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Routing misses come through as 404 "Not Found" or 405; both mean the
    # route does not exist for this request. "Not Found" is Starlette's default
    # detail, so routes must always raise 404 with an explicit detail or they
    # will be reported as unmatched.
    if exc.status_code == 405 or (exc.status_code == 404 and exc.detail == "Not Found"):
        return JSONResponse(status_code=404, content={"error": UNMATCHED_ROUTE_MESSAGE})
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only request bodies are validated by FastAPI (path ids are parsed by hand).
    message = NOTHING_TO_UPDATE_MESSAGE if request.method == "PUT" else MISSING_FIELDS_MESSAGE
    logger.debug("Rejected %s %s body: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": message})


def create_app(registry: Optional[BookRegistry] = None) -> FastAPI:
    """Build the application with its own registry (seeded by default)."""
    app = FastAPI(
        title="Books API",
        description="In-memory create/read/update/delete service for book records.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.registry = registry if registry is not None else BookRegistry()
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(catalog_router)
    return app


app = create_app()


def run() -> None:
    configure_logging()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
