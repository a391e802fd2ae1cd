"""
BloomFlow Safety — FastAPI Application

Run:
    uvicorn bloomflow_safety.api.app:app --reload --host 0.0.0.0 --port 8000

    or:

    python scripts/run_api.py
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..exceptions import BloomFlowSafetyError
from .config import config
from .dependencies import engine_manager, EngineUnavailable
from .routes import (
    health_router,
    red_flags_router,
    escalation_router,
    compliance_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the engine at startup"""
    logger.info("BloomFlow Safety API starting...")

    if engine_manager.is_loaded or engine_manager.load():
        logger.info("API ready, docs at http://%s:%s/docs", config.host, config.port)
    else:
        logger.warning("API starting in degraded mode: %s", engine_manager.error)

    yield

    logger.info("BloomFlow Safety API stopping")


app = FastAPI(
    title=config.api_title,
    description=config.api_description,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=config.cors_allow_credentials,
    allow_methods=config.cors_allow_methods,
    allow_headers=config.cors_allow_headers,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time

    # API requests only; bodies carry health data and are never logged
    if request.url.path.startswith(config.api_prefix):
        logger.info("%s %s → %d (%.1fms)", request.method, request.url.path,
                    response.status_code, process_time * 1000)

    return response


@app.exception_handler(EngineUnavailable)
async def engine_unavailable_handler(request: Request, exc: EngineUnavailable):
    return JSONResponse(
        status_code=503,
        content={"error": "Engine unavailable", "detail": str(exc)}
    )


@app.exception_handler(BloomFlowSafetyError)
async def safety_error_handler(request: Request, exc: BloomFlowSafetyError):
    return JSONResponse(
        status_code=400,
        content={"error": type(exc).__name__, "detail": str(exc)}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if config.debug else None
        }
    )


app.include_router(health_router)
app.include_router(red_flags_router, prefix=config.api_prefix)
app.include_router(escalation_router, prefix=config.api_prefix)
app.include_router(compliance_router, prefix=config.api_prefix)
