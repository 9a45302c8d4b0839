"""Shared schema plumbing: camelCase wire names, ids, timestamps."""

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase in stored JSON and API payloads."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
