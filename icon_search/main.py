"""icon_search.main

FastAPI entrypoint for the Icon Search Service.

Implements REST endpoints:
  - GET /api/v1/health
  - GET /api/v1/libraries
  - GET /api/v1/libraries/{prefix}/icons
  - GET /api/v1/icons/search
  - GET /api/v1/icons/{prefix}/{icon_name}
  - GET /api/v1/usage-examples

The MCP server is mounted on the same app over HTTP/SSE:
  - GET /sse          (event stream, one MCP session per connection)
  - POST /messages/    (client messages, addressed by ?session_id=)

Empty search results are a normal 200 response; only unknown libraries and
icons on the lookup endpoints answer 404.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from icon_search.config.settings import settings
from icon_search.core.catalog import IconCatalog
from icon_search.core.usage import icon_usage, usage_examples
from icon_search.mcp.server import mount_sse
from icon_search.models.entities import IconRecord, LibraryInfo
from icon_search.repository.catalog import get_catalog
from icon_search.utils.logger import get_logger

logger = get_logger(__name__)


class LibraryListResponse(BaseModel):
    libraries: list[LibraryInfo]
    library_count: int


class LibraryIconsResponse(BaseModel):
    library: LibraryInfo
    total_icons: int
    icons: list[IconRecord]


class IconSearchResponse(BaseModel):
    query: str
    results: list[IconRecord]
    total_count: int
    search_time_ms: float
    message: Optional[str] = None


class IconUsage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    import_: str = Field(alias="import")
    jsx: str
    with_props: str


class IconDetailResponse(BaseModel):
    icon: IconRecord
    library: LibraryInfo
    usage: IconUsage


class UsageExample(BaseModel):
    title: str
    description: str
    code: str


class UsageExamplesResponse(BaseModel):
    library_prefix: Optional[str] = None
    examples: dict[str, UsageExample]


class ErrorResponse(BaseModel):
    error: str
    message: str
    details: Optional[dict[str, Any]] = None
    timestamp: str
    request_id: str


app = FastAPI(
    title="Icon Search Service",
    version=settings.service_version,
)
mount_sse(app)


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or uuid4().hex
    request.state.request_id = request_id

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


def _error_response(
    request: Request,
    *,
    status_code: int,
    error: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> JSONResponse:
    payload = ErrorResponse(
        error=error,
        message=message,
        details=details,
        timestamp=datetime.now(timezone.utc).isoformat(),
        request_id=getattr(request.state, "request_id", ""),
    ).model_dump()
    return JSONResponse(status_code=status_code, content=payload)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    # Allow raising HTTPException(detail={...}) with our standard schema.
    if isinstance(exc.detail, dict) and "error" in exc.detail and "message" in exc.detail:
        return _error_response(
            request,
            status_code=exc.status_code,
            error=str(exc.detail.get("error")),
            message=str(exc.detail.get("message")),
            details=exc.detail.get("details"),
        )

    return _error_response(
        request,
        status_code=exc.status_code,
        error="HTTPException",
        message=str(exc.detail),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return _error_response(
        request,
        status_code=400,
        error="ValidationError",
        message="Request parameter validation failed",
        details={"errors": exc.errors()},
    )


def _library_not_found(prefix: str, catalog: IconCatalog) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail={
            "error": "LibraryNotFound",
            "message": f"Library with prefix '{prefix}' not found.",
            "details": {"available_prefixes": [lib.prefix for lib in catalog.list_libraries()]},
        },
    )


@app.get("/api/v1/health")
async def health():
    return {
        "status": "healthy",
        "version": settings.service_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": {
            "symbol_source": settings.symbol_source_type,
        },
    }


@app.get("/api/v1/libraries", response_model=LibraryListResponse)
async def list_libraries(catalog: IconCatalog = Depends(get_catalog)):
    libraries = catalog.list_libraries()
    return LibraryListResponse(libraries=libraries, library_count=len(libraries))


@app.get("/api/v1/libraries/{prefix}/icons", response_model=LibraryIconsResponse)
async def library_icons(
    prefix: str,
    limit: int = Query(default=settings.default_library_icon_limit, ge=1),
    catalog: IconCatalog = Depends(get_catalog),
):
    library = catalog.get_library(prefix)
    if library is None:
        raise _library_not_found(prefix, catalog)

    icons = catalog.list_icons(prefix)
    return LibraryIconsResponse(library=library, total_icons=len(icons), icons=icons[:limit])


@app.get("/api/v1/icons/search", response_model=IconSearchResponse)
async def search_icons(
    query: str = Query(..., min_length=1, description="Search term, optionally scoped as 'prefix:term'"),
    limit: int = Query(default=settings.default_search_limit, ge=1, le=settings.search_result_cap),
    catalog: IconCatalog = Depends(get_catalog),
):
    # Same normalisation as the MCP search_icons tool
    query = query.strip()
    if not query:
        raise HTTPException(
            status_code=400,
            detail={"error": "ValidationError", "message": "query must not be blank"},
        )

    started = time.perf_counter()
    results = catalog.search(query, limit=limit)
    elapsed_ms = (time.perf_counter() - started) * 1000.0

    logger.info(f"Search '{query}' returned {len(results)} icons in {elapsed_ms:.1f}ms")
    return IconSearchResponse(
        query=query,
        results=results,
        total_count=len(results),
        search_time_ms=elapsed_ms,
        message=None if results else f"No icons found matching '{query}'.",
    )


@app.get("/api/v1/icons/{prefix}/{icon_name}", response_model=IconDetailResponse)
async def icon_details(prefix: str, icon_name: str, catalog: IconCatalog = Depends(get_catalog)):
    library = catalog.get_library(prefix)
    if library is None:
        raise _library_not_found(prefix, catalog)

    icon = catalog.get_icon_details(prefix, icon_name)
    if icon is None:
        raise HTTPException(
            status_code=404,
            detail={
                "error": "IconNotFound",
                "message": f"Icon '{icon_name}' not found in library '{prefix}'.",
                "details": {"library_prefix": prefix, "icon_name": icon_name},
            },
        )

    return IconDetailResponse(icon=icon, library=library, usage=IconUsage(**icon_usage(library, icon_name)))


@app.get("/api/v1/usage-examples", response_model=UsageExamplesResponse)
async def get_usage_examples(
    library_prefix: Optional[str] = None,
    catalog: IconCatalog = Depends(get_catalog),
):
    examples = usage_examples(catalog, library_prefix)
    return UsageExamplesResponse(
        library_prefix=library_prefix,
        examples={key: UsageExample(**example) for key, example in examples.items()},
    )


def run() -> None:
    import uvicorn

    uvicorn.run(
        "icon_search.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    run()
