"""
BloomFlow Safety — REST API

Thin FastAPI adapter over the engine for the web front end. Stateless:
every request carries the records it needs, nothing is stored.

Run:
    uvicorn bloomflow_safety.api.app:app --reload --port 8000

Docs:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)

Endpoints:
    GET  /                          - Root info
    GET  /health                    - Health check

    GET  /api/red-flags/catalog     - Loaded red-flag catalog
    POST /api/red-flags/detect      - Red flags + emergency resources
    POST /api/escalation            - Compare two symptom snapshots
    POST /api/compliance/score      - Compliance score and band
    POST /api/compliance/report     - Report with issues
"""

from .app import app
from .dependencies import engine_manager, get_engine


__all__ = [
    "app",
    "engine_manager",
    "get_engine",
]
