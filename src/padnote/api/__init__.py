"""API routers for the pad service."""

from .health import router as health_router
from .pads import router as pads_router

__all__ = ["pads_router", "health_router"]
