"""
API Backend - Main Application
Personal finance tracker: users, expenses and incomes
"""
import logging
from datetime import datetime
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .routers import auth, expenses, incomes
from .database import init_database, close_database
from .identity import init_identity_provider, close_identity_provider
from .config import settings

# Configure logging
structlog.configure(
    processors=[
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(settings.LOG_LEVEL.upper())
    ),
)
logger = structlog.get_logger()

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting API Backend", environment=settings.ENVIRONMENT)

    # Store and identity provider are ready before any route is served
    await init_database()
    init_identity_provider()

    logger.info("API Backend started successfully")

    yield

    # Shutdown
    logger.info("Shutting down API Backend")
    close_identity_provider()
    await close_database()


app = FastAPI(
    title="Finance Tracker - API",
    description="Signup/login and expense/income records per user.",
    version=API_VERSION,
    lifespan=lifespan,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception handlers
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Unparseable bodies are client errors like any other: 400 with a message"""
    message = "; ".join(err.get("msg", "") for err in exc.errors())
    logger.warning("Invalid request body",
                   path=request.url.path,
                   method=request.method,
                   error=message)
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception",
                 path=request.url.path,
                 method=request.method,
                 error=str(exc))
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "error_id": str(datetime.utcnow().timestamp())}
    )


# Include routers
app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(expenses.router, prefix="/api/expenses", tags=["Expenses"])
app.include_router(incomes.router, prefix="/api/incomes", tags=["Incomes"])


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "api",
        "timestamp": datetime.utcnow().isoformat(),
        "environment": settings.ENVIRONMENT,
    }


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API info"""
    return {
        "name": "Finance Tracker API",
        "version": API_VERSION,
        "docs": "/docs",
        "health": "/health"
    }


def run():
    """Serve the API with uvicorn on the configured port"""
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
