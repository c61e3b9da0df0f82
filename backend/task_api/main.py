# -*- coding: utf-8 -*-

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api.endpoints.challenge import router as challenge_router
from .api.endpoints.tasks import router as tasks_router
from .api.endpoints.validation import router as validation_router
from .core.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

logger = logging.getLogger(__name__)

ENDPOINTS = (
    ("GET", "/api/health"),
    ("GET", "/api/test"),
    ("GET", "/api/tasks"),
    ("POST", "/api/tasks"),
    ("PATCH", "/api/tasks/{task_id}"),
    ("DELETE", "/api/tasks/{task_id}"),
    ("GET", "/api/flag"),
    ("GET", "/api/token"),
    ("POST", "/api/validate-string"),
    ("POST", "/api/validate-batch"),
    ("POST", "/api/validate-batch/upload"),
)


def _log_startup_banner() -> None:
    current = get_settings()
    logger.info("Task API %s listening on port %d", __version__, current.port)
    if current.jwt_secret:
        logger.info("JWT_SECRET is configured")
    else:
        logger.warning("JWT_SECRET is NOT configured - check your .env file!")
    for method, path in ENDPOINTS:
        logger.info("  %-6s %s", method, path)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    _log_startup_banner()
    yield
    logger.info("Task API shutting down")


app = FastAPI(title="Task API", version=__version__, lifespan=lifespan)

# CORS - React frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tasks_router)
app.include_router(validation_router)
app.include_router(challenge_router)


@app.get("/")
async def root():
    return {"message": "Task API", "version": __version__}


@app.get("/api/health")
async def health():
    return {"status": "ok", "message": "API is running"}


@app.get("/api/test")
async def test_endpoint():
    return {
        "message": "API is working!",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def run() -> None:
    """Serve the application with uvicorn using ``HOST`` and ``PORT``."""
    import uvicorn

    current = get_settings()
    uvicorn.run("task_api.main:app", host=current.host, port=current.port)


if __name__ == "__main__":
    run()
