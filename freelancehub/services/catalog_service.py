"""
Catalog service - publishing, editing and browsing freelancer services.
Challenge: Owner-only mutations without any server-side session.
Design: Every mutation takes the actor id and checks it against freelancer_id.
"""

import logging
from typing import Any

from freelancehub.core.errors import NotFoundError, PermissionDeniedError
from freelancehub.db.repositories import Repository
from freelancehub.schemas.base import utcnow
from freelancehub.schemas.service import (
    ALL_CATEGORIES,
    Service,
    ServiceChanges,
    ServiceDraft,
)
from freelancehub.schemas.user import UserType
from freelancehub.services.base import Clock, load_actor, parse_input

logger = logging.getLogger(__name__)


class CatalogService:
    """Freelancer-side service management and client-side discovery."""

    def __init__(self, repo: Repository, clock: Clock = utcnow):
        self.repo = repo
        self.clock = clock

    async def publish(self, actor_id: str, draft: ServiceDraft | dict[str, Any]) -> Service:
        """Create an active service owned by the actor."""
        actor = await load_actor(self.repo, actor_id, UserType.FREELANCER)
        draft = parse_input(ServiceDraft, draft)
        service = Service(
            freelancer_id=actor.id,
            freelancer_name=actor.full_name,
            title=draft.title,
            description=draft.description,
            category=draft.category,
            price=draft.price,
            delivery_days=draft.delivery_days,
            is_active=True,
            created_at=self.clock(),
        )
        await self.repo.services.insert(service)
        logger.info("Freelancer %s published service %s", actor.id, service.id)
        return service

    async def update(
        self, actor_id: str, service_id: str, changes: ServiceChanges | dict[str, Any]
    ) -> Service:
        """Apply the fields that were sent; the rest stay as stored."""
        await self._owned(actor_id, service_id)
        changes = parse_input(ServiceChanges, changes)
        fields = changes.model_dump(exclude_unset=True, exclude_none=True)
        updated = await self.repo.services.update(service_id, fields)
        if updated is None:
            raise NotFoundError(f"Service {service_id} not found")
        return updated

    async def toggle_active(self, actor_id: str, service_id: str) -> Service:
        service = await self._owned(actor_id, service_id)
        updated = await self.repo.services.update(service_id, {"is_active": not service.is_active})
        if updated is None:
            raise NotFoundError(f"Service {service_id} not found")
        logger.info("Service %s active=%s", service_id, updated.is_active)
        return updated

    async def delete(self, actor_id: str, service_id: str) -> None:
        """Remove the service. Existing bookings keep their snapshots."""
        await self._owned(actor_id, service_id)
        await self.repo.services.delete_by_id(service_id)
        logger.info("Service %s deleted by %s", service_id, actor_id)

    async def get(self, service_id: str) -> Service:
        service = await self.repo.services.get_by_id(service_id)
        if service is None:
            raise NotFoundError(f"Service {service_id} not found")
        return service

    async def list_for_freelancer(self, freelancer_id: str) -> list[Service]:
        """All of a freelancer's services, inactive ones included."""
        return await self.repo.services.list_by_freelancer(freelancer_id)

    async def browse(self, category: str | None = None, query: str | None = None) -> list[Service]:
        """Active services filtered by exact category and a case-insensitive search."""
        services = await self.repo.services.list_active()
        if category and category != ALL_CATEGORIES:
            services = [s for s in services if s.category == category]
        if query:
            needle = query.lower()
            services = [
                s
                for s in services
                if needle in s.title.lower()
                or needle in s.description.lower()
                or needle in s.freelancer_name.lower()
            ]
        return services

    async def _owned(self, actor_id: str, service_id: str) -> Service:
        service = await self.get(service_id)
        if service.freelancer_id != actor_id:
            raise PermissionDeniedError("You can only manage your own services")
        return service

