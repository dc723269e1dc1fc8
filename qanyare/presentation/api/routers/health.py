"""
Health check route, served outside the /api prefix
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from qanyare.infrastructure.container.dependency_injection import DependencyContainer
from qanyare.presentation.api.dependencies import get_container

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(container: DependencyContainer = Depends(get_container)):
    storage_health = container.health_check()
    body = {
        "status": storage_health["status"],
        "storageBackend": container.config.storage_backend,
        "environment": container.config.environment,
    }
    if storage_health["status"] != "healthy":
        body["error"] = storage_health.get("error")
        return JSONResponse(status_code=503, content=body)
    return body
