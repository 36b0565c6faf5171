"""
Sales Sheets API - Backend for sellers, clients and sales records
FastAPI in front of a single Google Sheets spreadsheet (sellers / clients / sells tabs)

Install dependencies:
pip install -e .

Run server:
uvicorn main:app --host 0.0.0.0 --port 1337
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import time
import uuid

from dependencies import get_sheets_adapter
from settings import get_settings

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# ============================================================================
# FASTAPI APP
# ============================================================================

app = FastAPI(
    title="Sales Sheets API",
    description="Read sellers/clients and append clients/sales to Google Sheets",
    version="1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)


# ========== Request Tracing Middleware ==========
@app.middleware("http")
async def request_tracing_middleware(request: Request, call_next):
    """Add request_id and timing to all requests."""
    request_id = str(uuid.uuid4())[:8]
    started = time.time()

    response = await call_next(request)

    latency_ms = round((time.time() - started) * 1000, 2)
    logger.info(
        f"[{request_id}] {request.method} {request.url.path} -> {response.status_code} ({latency_ms} ms)"
    )

    response.headers["X-Request-ID"] = request_id
    return response


ALLOWED_ORIGINS = settings.get_origins_list()

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
)


# ============================================================================
# ERROR HANDLERS (every error body is {"error": "<message>"})
# ============================================================================

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))
    else:
        message = "Invalid request body"
    logger.warning(f"Rejected request body on {request.url.path}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)}
    )


# ============================================================================
# ROUTERS
# ============================================================================

from routers import sellers as sellers_router
app.include_router(sellers_router.router)

from routers import clients as clients_router
app.include_router(clients_router.router)

from routers import sells as sells_router
app.include_router(sells_router.router)


@app.on_event("startup")
async def startup_event():
    logger.info("Sales Sheets API starting up...")
    # Resolve the credential source once, before the first request
    get_sheets_adapter()
    logger.info(f"Allowed origins: {ALLOWED_ORIGINS}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
