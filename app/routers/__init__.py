# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - calculate.py: Arithmetic endpoint
# - health.py: Health check endpoints
#
# Each router is mounted in main.py.
# =============================================================================

from . import calculate
from . import health

__all__ = [
    "calculate",
    "health",
]
