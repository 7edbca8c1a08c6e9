"""
Backend entry point.

Serves the schedule selector API with FastAPI. The lifespan closes database
connections on shutdown, which gives uvicorn's signal handling and --reload
for free.

Run with: python main.py [--port PORT]
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

# Set up import paths before any local imports
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

# Load .env.local first (if exists), then .env as fallback
# .env.local is gitignored and used for local dev overrides
load_dotenv(project_root / ".env.local")  # Local overrides (gitignored)
load_dotenv()  # Fallback to .env

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import (
    check_required_env_vars,
    get_allowed_origins,
    get_api_port,
    get_log_level,
    get_sentry_dsn,
    is_dev_mode,
)
from core.database import close_engine, is_configured
from web_api.routes.schedule import router as schedule_router

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

if get_sentry_dsn():
    sentry_sdk.init(
        dsn=get_sentry_dsn(),
        environment="development" if is_dev_mode() else "production",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan context manager."""
    ok, warnings = check_required_env_vars()
    for warning in warnings:
        logger.warning(warning)
    if not ok:
        logger.error("Missing required environment variables")

    yield  # FastAPI runs here

    logger.info("Shutting down...")
    await close_engine()  # Close database connections


# Create FastAPI app with lifespan
app = FastAPI(
    title="Class Schedule Selector API",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(schedule_router)


@app.get("/api/status")
async def api_status():
    return {"status": "ok"}


@app.get("/health")
async def health():
    """Health check endpoint with detailed status."""
    return {
        "status": "healthy",
        "database_configured": is_configured(),
    }


if __name__ == "__main__":
    import argparse
    import uvicorn

    parser = argparse.ArgumentParser(description="Class Schedule Selector Server")
    parser.add_argument(
        "--port",
        type=int,
        default=get_api_port(),
        help="Port to listen on (default: API_PORT or 8000)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Reload on code changes",
    )
    args = parser.parse_args()

    uvicorn.run("main:app", host="0.0.0.0", port=args.port, reload=args.reload)
