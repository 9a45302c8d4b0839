"""
Base repository - generic CRUD over one JSON array stored under a fixed key.
Challenge: Whole-collection read-modify-write with no partial writes.
Design: Every read deserializes a fresh copy; every write re-serializes the
whole collection before touching the store (last writer wins).
"""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from freelancehub.core.errors import StorageError, ValidationError, validation_message
from freelancehub.db.store import KeyValueStore
from freelancehub.schemas.base import CamelModel

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=CamelModel)


class JsonCollectionRepository(Generic[ModelType]):
    """Generic collection repository. Subclasses add entity-specific queries."""

    def __init__(self, store: KeyValueStore, key: str, model: type[ModelType]):
        self.store = store
        self.key = key
        self.model = model
        self._adapter = TypeAdapter(list[model])

    async def list(self) -> list[ModelType]:
        """All entities in insertion order. A missing key reads as empty."""
        raw = await self.store.get(self.key)
        if not raw:
            return []
        try:
            return self._adapter.validate_json(raw)
        except PydanticValidationError as e:
            logger.warning("corrupt collection under %s: %s", self.key, e)
            raise StorageError(f"Stored data under {self.key} is corrupt") from e

    async def replace_all(self, entities: list[ModelType]) -> None:
        """Overwrite the collection. Serializes fully before writing."""
        try:
            payload = self._adapter.dump_json(entities, by_alias=True).decode("utf-8")
        except PydanticSerializationError as e:
            raise StorageError(f"Could not serialize {self.key}") from e
        await self.store.set(self.key, payload)

    async def insert(self, entity: ModelType) -> ModelType:
        """Append. No uniqueness check."""
        entities = await self.list()
        entities.append(entity)
        await self.replace_all(entities)
        return entity

    async def get_by_id(self, id: str) -> ModelType | None:
        for entity in await self.list():
            if entity.id == id:
                return entity
        return None

    async def update(self, id: str, fields: dict[str, Any]) -> ModelType | None:
        """Merge snake_case ``fields`` onto the entity. Absent id is a no-op returning None."""
        entities = await self.list()
        for index, entity in enumerate(entities):
            if entity.id != id:
                continue
            data = entity.model_dump()
            data.update({name: value for name, value in fields.items() if name != "id"})
            try:
                updated = self.model.model_validate(data)
            except PydanticValidationError as e:
                raise ValidationError(validation_message(e)) from e
            entities[index] = updated
            await self.replace_all(entities)
            return updated
        return None
