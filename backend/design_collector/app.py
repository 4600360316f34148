"""FastAPI application setup for the design collector host."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from design_collector.api.dependencies import get_app_settings, get_pipeline, get_table
from design_collector.api.routes_analyze import router as analyze_router
from design_collector.api.routes_designs import router as designs_router
from design_collector.core.logging import configure_logging, get_logger
from design_collector.models.dto import HealthResponse
from design_collector.store.csv_table import StoreError

VERSION = "1.0.0"

configure_logging()
logger = get_logger(__name__)

app = FastAPI(
    title="Design Collector",
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_app_settings().cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(analyze_router, prefix="", tags=["analyze"])
app.include_router(designs_router, prefix="", tags=["designs"])


@app.exception_handler(StoreError)
@app.exception_handler(OSError)
async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Storage failure on %s: %s", request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})


@app.on_event("startup")
async def startup() -> None:
    """Warm up core singletons on startup."""
    get_app_settings()
    get_table()
    get_pipeline()


@app.get("/health", response_model=HealthResponse, tags=["admin"])
def health() -> HealthResponse:
    """Simple liveness check."""
    return HealthResponse(status="ok", version=VERSION)
