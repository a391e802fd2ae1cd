"""
BloomFlow Safety — API Routes

All routers.
"""

from .health import router as health_router
from .red_flags import router as red_flags_router
from .escalation import router as escalation_router
from .compliance import router as compliance_router

__all__ = [
    'health_router',
    'red_flags_router',
    'escalation_router',
    'compliance_router',
]
