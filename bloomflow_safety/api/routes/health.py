"""
BloomFlow Safety — Health Routes

Health check and service info.
"""

from fastapi import APIRouter

from ... import __version__
from ..dependencies import engine_manager
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Server status.

    Returns "degraded" when the engine (catalog) failed to load.
    """
    catalog = engine_manager.catalog
    return HealthResponse(
        status="ok" if engine_manager.is_loaded else "degraded",
        version=__version__,
        engine_loaded=engine_manager.is_loaded,
        catalog_version=catalog.version if catalog else None,
        catalog_patterns=len(catalog) if catalog else 0,
    )


@router.get("/")
async def root():
    """Service info"""
    return {
        "name": "BloomFlow Safety API",
        "version": __version__,
        "description": "Symptom red flags, escalation and compliance scoring",
        "docs": "/docs",
        "health": "/health",
    }
