# app/main.py
"""
FastAPI application entry point.
Includes CORS, request timing, global error handlers, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.routers import routes, fares, tickets, statistics, auth, chat, health
from app.database import create_tables
from app.config import settings
from app.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Conductor Assist API",
    description="Bus conductor ticketing backend with a Gemini-powered assistant.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (conductor app and dashboard call the API directly) ────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Exception Handlers ───────────────────────────────────────────────────────
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    missing = [".".join(str(p) for p in err["loc"][1:]) for err in exc.errors()]
    logger.info(f"Rejected request to {request.url.path}: invalid fields {missing}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Missing or invalid fields", "details": missing},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error", "details": str(exc)},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(routes.router,     prefix="/api", tags=["🛣️  Routes"])
app.include_router(fares.router,      prefix="/api", tags=["💰 Fares"])
app.include_router(tickets.router,    prefix="/api", tags=["🎫 Tickets"])
app.include_router(statistics.router, prefix="/api", tags=["📊 Statistics"])
app.include_router(auth.router,       prefix="/api", tags=["🔑 Login"])
app.include_router(chat.router,       prefix="/api", tags=["🤖 Assistant"])
app.include_router(health.router,     prefix="/api", tags=["💚 Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("🚍 Conductor Assist starting up...")
    create_tables()
    logger.info("✅ Database tables ready")
    logger.info(f"🤖 Gemini model: {settings.GEMINI_MODEL} (key set: {bool(settings.GEMINI_API_KEY)})")
    logger.info(f"🌐 Listening on http://{settings.BACKEND_HOST}:{settings.BACKEND_PORT}")
    logger.info("📖 API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 Conductor Assist shutting down...")
