"""
Booking repository - bookings are appended and updated, never deleted.
"""

from freelancehub.db.repositories.base_repository import JsonCollectionRepository
from freelancehub.db.store import KeyValueStore
from freelancehub.schemas.booking import Booking


class BookingRepository(JsonCollectionRepository[Booking]):
    def __init__(self, store: KeyValueStore, key: str):
        super().__init__(store, key, Booking)

    async def list_by_client(self, client_id: str) -> list[Booking]:
        return [b for b in await self.list() if b.client_id == client_id]

    async def list_by_freelancer(self, freelancer_id: str) -> list[Booking]:
        return [b for b in await self.list() if b.freelancer_id == freelancer_id]
