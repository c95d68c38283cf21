"""Health service implementation."""

import asyncio
from datetime import datetime
from typing import Any, Dict, Optional

from ...config import Settings, get_settings
from ..exceptions import StoreUnavailable
from ..schemas.common import HealthCheckResponse
from ..store import IKeyValueStore
from .interfaces import IHealthService


class HealthService(IHealthService):
    """Health check service implementation."""

    def __init__(self, store: IKeyValueStore, settings: Optional[Settings] = None):
        self.store = store
        self.settings = settings or get_settings()

    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        store_health = await self.check_store_health()

        overall_status = "healthy" if store_health["connected"] else "unhealthy"

        return HealthCheckResponse(
            status=overall_status,
            timestamp=datetime.utcnow(),
            version=self.settings.app_version,
            checks={"store": store_health},
        )

    async def check_store_health(self) -> Dict[str, Any]:
        """Check backing store connection."""
        try:
            start_time = asyncio.get_running_loop().time()
            await self.store.ping()
            response_time = (asyncio.get_running_loop().time() - start_time) * 1000

            return {
                "connected": True,
                "status": "healthy",
                "backend": self.settings.storage_backend,
                "response_time_ms": round(response_time, 2),
            }
        except StoreUnavailable as e:
            return {
                "connected": False,
                "status": "unhealthy",
                "backend": self.settings.storage_backend,
                "error": str(e),
                "response_time_ms": None,
            }
