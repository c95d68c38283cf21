"""
Service layer interfaces and implementations.
"""

from .interfaces import IHealthService, IPadService

from .health_service import HealthService
from .pad_service import PadService

__all__ = [
    # Interfaces
    "IPadService",
    "IHealthService",

    # Implementations
    "PadService",
    "HealthService",
]
