"""Service (marketplace offer) entity and publish/update schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field

from freelancehub.schemas.base import CamelModel, new_id, utcnow

# Suggested in forms, never enforced.
SERVICE_CATEGORIES = [
    "Web Development",
    "Mobile Development",
    "Design",
    "Writing",
    "Marketing",
    "Video Editing",
    "Other",
]

ALL_CATEGORIES = "All"


class Service(CamelModel):
    """Stored service record. freelancer_name is a snapshot taken at publish time."""

    id: str = Field(default_factory=new_id)
    freelancer_id: str
    freelancer_name: str
    title: str
    description: str
    category: str
    price: float
    delivery_days: int
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)


class ServiceDraft(CamelModel):
    """Fields a freelancer fills in to publish a service."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    price: float = Field(..., gt=0, allow_inf_nan=False)
    delivery_days: int = Field(..., gt=0)


class ServiceChanges(CamelModel):
    """Partial update; only fields that were sent are applied."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    category: str | None = Field(None, min_length=1)
    price: float | None = Field(None, gt=0, allow_inf_nan=False)
    delivery_days: int | None = Field(None, gt=0)
    is_active: bool | None = None
