"""
BloomFlow Safety — Red-flag Routes

Endpoints:
- catalog in use
- red-flag detection with emergency resources
"""

from fastapi import APIRouter, Depends

from ...red_flags import SymptomCheckResult
from ..dependencies import get_engine, EngineManager
from ..models import CatalogResponse, DetectRequest

router = APIRouter(prefix="/red-flags", tags=["Red flags"])


@router.get("/catalog", response_model=CatalogResponse)
async def get_catalog(
    engine: EngineManager = Depends(get_engine)
) -> CatalogResponse:
    """Version and patterns of the loaded red-flag catalog"""
    data = engine.catalog.to_dict()
    return CatalogResponse(version=data["version"], patterns=data["patterns"])


@router.post("/detect", response_model=SymptomCheckResult)
async def detect(
    request: DetectRequest,
    engine: EngineManager = Depends(get_engine)
) -> SymptomCheckResult:
    """
    Check symptoms for red flags.

    Returns the flags, the highest flag severity and, when anything
    fired, the emergency resources to show.

    Example:
    ```json
    {
        "symptoms": [
            {"name": "heavy flow", "severity": "severe", "category": "bleeding"}
        ]
    }
    ```
    """
    return engine.classifier.check(request.symptoms)
