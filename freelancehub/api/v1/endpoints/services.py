"""
Service endpoints - marketplace browsing and freelancer service management.
Design: Thin controller; the acting user is the current session, ownership is checked in CatalogService.
"""

from fastapi import APIRouter, Query, status

from freelancehub.core.dependencies import CurrentUser, RepositoryDep
from freelancehub.db.repositories import Repository
from freelancehub.schemas.service import SERVICE_CATEGORIES, Service, ServiceChanges, ServiceDraft
from freelancehub.services.catalog_service import CatalogService

router = APIRouter()


def _get_catalog(repo: Repository) -> CatalogService:
    """Factory for the service with repository injection."""
    return CatalogService(repo)


@router.get("", response_model=list[Service])
async def browse_services(
    repo: RepositoryDep,
    category: str | None = Query(None),
    q: str | None = Query(None),
):
    """Active services, optionally filtered by category and search text."""
    return await _get_catalog(repo).browse(category=category, query=q)


@router.get("/categories", response_model=list[str])
async def list_categories():
    return SERVICE_CATEGORIES


@router.get("/mine", response_model=list[Service])
async def my_services(repo: RepositoryDep, user: CurrentUser):
    return await _get_catalog(repo).list_for_freelancer(user.id)


@router.post("", response_model=Service, status_code=status.HTTP_201_CREATED)
async def publish_service(repo: RepositoryDep, user: CurrentUser, data: ServiceDraft):
    return await _get_catalog(repo).publish(user.id, data)


@router.put("/{service_id}", response_model=Service)
async def update_service(repo: RepositoryDep, user: CurrentUser, service_id: str, data: ServiceChanges):
    return await _get_catalog(repo).update(user.id, service_id, data)


@router.post("/{service_id}/toggle", response_model=Service)
async def toggle_service(repo: RepositoryDep, user: CurrentUser, service_id: str):
    """Show or hide the service in the marketplace."""
    return await _get_catalog(repo).toggle_active(user.id, service_id)


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(repo: RepositoryDep, user: CurrentUser, service_id: str):
    await _get_catalog(repo).delete(user.id, service_id)
