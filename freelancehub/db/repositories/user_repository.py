"""
User repository - user lookups on top of the generic collection CRUD.
"""

from freelancehub.db.repositories.base_repository import JsonCollectionRepository
from freelancehub.db.store import KeyValueStore
from freelancehub.schemas.user import User


class UserRepository(JsonCollectionRepository[User]):
    """Users are never deleted, so there is no delete operation here."""

    def __init__(self, store: KeyValueStore, key: str):
        super().__init__(store, key, User)

    async def get_by_email(self, email: str) -> User | None:
        """First user with exactly this email - used for login and registration."""
        for user in await self.list():
            if user.email == email:
                return user
        return None
