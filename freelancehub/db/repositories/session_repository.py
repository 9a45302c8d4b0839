"""
Session repository - the single "current user" pointer.
Challenge: The persisted record is a User snapshot, which goes stale after profile edits.
Design: Keep the snapshot layout on disk but resolve it by id against Users on every read.
"""

import logging

from pydantic import ValidationError as PydanticValidationError

from freelancehub.core.errors import StorageError
from freelancehub.db.repositories.user_repository import UserRepository
from freelancehub.db.store import KeyValueStore
from freelancehub.schemas.user import User

logger = logging.getLogger(__name__)


class SessionRepository:
    """At most one current user; absence means logged out."""

    def __init__(self, store: KeyValueStore, key: str, users: UserRepository):
        self.store = store
        self.key = key
        self.users = users

    async def get_snapshot(self) -> User | None:
        """The record exactly as last written (may be stale)."""
        raw = await self.store.get(self.key)
        if not raw:
            return None
        try:
            return User.model_validate_json(raw)
        except PydanticValidationError as e:
            logger.warning("corrupt session pointer under %s: %s", self.key, e)
            raise StorageError("Stored session is corrupt") from e

    async def get(self) -> User | None:
        """Live user behind the pointer, or None if logged out or the user is gone."""
        snapshot = await self.get_snapshot()
        if snapshot is None:
            return None
        return await self.users.get_by_id(snapshot.id)

    async def set(self, user: User | None) -> None:
        if user is None:
            await self.clear()
            return
        await self.store.set(self.key, user.model_dump_json(by_alias=True))

    async def clear(self) -> None:
        await self.store.remove(self.key)
