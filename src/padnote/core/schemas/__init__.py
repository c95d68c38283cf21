"""
Pydantic schemas for documenting API responses.
"""

from .common import ErrorResponse, HealthCheckResponse
from .pads import PadUpdateResponse

__all__ = [
    "PadUpdateResponse",
    "ErrorResponse",
    "HealthCheckResponse",
]
