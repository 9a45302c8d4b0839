"""
Repository facade - one object owning every collection and the session pointer.
Design: Built once per process around a store and passed to callers (no singleton).
"""

from freelancehub.db.repositories.booking_repository import BookingRepository
from freelancehub.db.repositories.service_repository import ServiceRepository
from freelancehub.db.repositories.session_repository import SessionRepository
from freelancehub.db.repositories.user_repository import UserRepository
from freelancehub.db.store import KeyValueStore, StorageKeys


class Repository:
    def __init__(self, store: KeyValueStore, keys: StorageKeys | None = None):
        self.store = store
        self.keys = keys or StorageKeys.with_prefix()
        self.users = UserRepository(store, self.keys.users)
        self.services = ServiceRepository(store, self.keys.services)
        self.bookings = BookingRepository(store, self.keys.bookings)
        self.session = SessionRepository(store, self.keys.current_user, self.users)

    async def close(self) -> None:
        await self.store.close()
