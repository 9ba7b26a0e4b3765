# timegap/main.py
"""
FastAPI application entry point.
Includes security middleware, global error handlers, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from timegap.routers import upload, records, filters, summary, health
from timegap.config import settings
from timegap.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Badge Scan Time Gap API",
    description="Per-employee, per-day first/last scan gaps from an uploaded time clock workbook.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (the dashboard page is served from elsewhere) ──────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── API Key Middleware ───────────────────────────────────────────────────────
API_PREFIX = "/api/v1"
OPEN_PATHS = {f"{API_PREFIX}/health", "/docs", "/redoc", "/openapi.json"}


def has_valid_api_key(request: Request) -> bool:
    """True when auth is off, the path is open, or the request carries the key."""
    if not settings.API_KEY or request.url.path in OPEN_PATHS:
        return True
    supplied = request.headers.get("X-API-Key") or request.query_params.get("api_key")
    return supplied == settings.API_KEY


class APIKeyMiddleware(BaseHTTPMiddleware):
    """Rejects dataset calls without X-API-Key when API_KEY is configured."""
    async def dispatch(self, request: Request, call_next):
        if not has_valid_api_key(request):
            logger.warning(f"Rejected {request.method} {request.url.path}: bad API key")
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Invalid or missing API key"},
            )
        return await call_next(request)


app.add_middleware(APIKeyMiddleware)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def time_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Process-Time-Ms"] = f"{elapsed_ms:.1f}"
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({elapsed_ms:.1f}ms)")
    return response


# ── Global Exception Handler ─────────────────────────────────────────────────
@app.exception_handler(Exception)
async def unhandled_exception(request: Request, exc: Exception):
    logger.error(f"{request.method} {request.url.path} failed: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(upload.router,  prefix=API_PREFIX, tags=["Upload"])
app.include_router(records.router, prefix=API_PREFIX, tags=["Records"])
app.include_router(filters.router, prefix=API_PREFIX, tags=["Filters"])
app.include_router(summary.router, prefix=API_PREFIX, tags=["Time Gap Summary"])
app.include_router(health.router,  prefix=API_PREFIX, tags=["Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("Time gap backend starting up...")
    logger.info(f"Listening on http://{settings.BACKEND_HOST}:{settings.BACKEND_PORT}")
    logger.info(f"Export file: {settings.EXPORT_FILE_NAME} (sheet '{settings.EXPORT_SHEET_NAME}')")


@app.on_event("shutdown")
async def shutdown():
    logger.info("Time gap backend shutting down...")
