"""External-facing routers (non-versioned endpoints).

Examples: system/health endpoints, secrets demo endpoints.
"""

from src.presentation.routers.demo import demo_router
from src.presentation.routers.system import system_router

__all__ = ["demo_router", "system_router"]
