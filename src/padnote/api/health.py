"""Health check API endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from ..core.schemas.common import HealthCheckResponse
from ..core.services import HealthService
from ..core.store import IKeyValueStore
from ..storage import get_store

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", response_model=HealthCheckResponse)
async def health_check(request: Request, store: IKeyValueStore = Depends(get_store)):
    """Get overall system health status."""
    health_service = HealthService(store, request.app.state.settings)
    return await health_service.get_health_status()


@router.get("/store", response_model=Dict[str, Any])
async def store_health(request: Request, store: IKeyValueStore = Depends(get_store)):
    """Check backing store connectivity."""
    health_service = HealthService(store, request.app.state.settings)
    return await health_service.check_store_health()
