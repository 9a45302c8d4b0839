"""
Helpers shared by the rule services: actor lookup, role checks, input parsing.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from freelancehub.core.errors import (
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
    validation_message,
)
from freelancehub.db.repositories import Repository
from freelancehub.schemas.user import User, UserType

Clock = Callable[[], datetime]

SchemaType = TypeVar("SchemaType", bound=BaseModel)


async def load_actor(repo: Repository, actor_id: str, role: UserType | None = None) -> User:
    """Resolve the acting user, optionally requiring a role."""
    actor = await repo.users.get_by_id(actor_id)
    if actor is None:
        raise NotFoundError(f"User {actor_id} not found")
    if role is not None and actor.user_type != role:
        raise PermissionDeniedError(f"Only {role.value}s can do this")
    return actor


def parse_input(schema: type[SchemaType], data: SchemaType | dict[str, Any]) -> SchemaType:
    """Validate raw form data into ``schema``, raising our ValidationError."""
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(validation_message(e)) from e
