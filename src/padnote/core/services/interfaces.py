"""
Service interfaces for the pad application.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from ..schemas.common import HealthCheckResponse


class IPadService(ABC):
    """Pad service: identifier minting and content access."""

    @abstractmethod
    async def allocate_id(self) -> str:
        """Mint a new pad identifier."""
        pass

    @abstractmethod
    async def read(self, pad_id: str) -> str:
        """Get pad content."""
        pass

    @abstractmethod
    async def write(self, pad_id: str, content: str) -> None:
        """Overwrite pad content."""
        pass

    @abstractmethod
    def decode_id(self, pad_id: str) -> int:
        """Recover the counter value behind an identifier."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        pass

    @abstractmethod
    async def check_store_health(self) -> Dict[str, Any]:
        """Check backing store connection."""
        pass
