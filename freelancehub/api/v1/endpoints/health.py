"""
Health checks - liveness and store readiness.
"""

from fastapi import APIRouter, HTTPException, status

from freelancehub.config import get_settings
from freelancehub.core.dependencies import RepositoryDep

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(repo: RepositoryDep):
    """Readiness: can the store be reached?"""
    if not await repo.store.ping():
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Store unavailable")
    return {"status": "ready"}
