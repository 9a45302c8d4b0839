"""
Service repository - marketplace offers, the only collection with deletes.
"""

from freelancehub.db.repositories.base_repository import JsonCollectionRepository
from freelancehub.db.store import KeyValueStore
from freelancehub.schemas.service import Service


class ServiceRepository(JsonCollectionRepository[Service]):
    """Service-specific queries. Linear filters, insertion order kept."""

    def __init__(self, store: KeyValueStore, key: str):
        super().__init__(store, key, Service)

    async def delete_by_id(self, id: str) -> None:
        """Remove the service if present. Bookings that reference it are untouched."""
        services = await self.list()
        await self.replace_all([s for s in services if s.id != id])

    async def list_by_freelancer(self, freelancer_id: str) -> list[Service]:
        return [s for s in await self.list() if s.freelancer_id == freelancer_id]

    async def list_active(self) -> list[Service]:
        return [s for s in await self.list() if s.is_active]
