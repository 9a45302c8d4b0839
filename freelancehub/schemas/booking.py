"""Booking entity, its status machine, and the booking request schema."""

from datetime import datetime
from enum import Enum

from pydantic import Field

from freelancehub.schemas.base import CamelModel, new_id, utcnow


class BookingStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# Only these moves exist; completed and cancelled are terminal.
ALLOWED_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING: frozenset({BookingStatus.ACCEPTED, BookingStatus.CANCELLED}),
    BookingStatus.ACCEPTED: frozenset({BookingStatus.COMPLETED}),
    BookingStatus.COMPLETED: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
}


def can_transition(current: BookingStatus, target: BookingStatus) -> bool:
    return target in ALLOWED_TRANSITIONS[current]


class Booking(CamelModel):
    """Stored booking. Title, names and price are snapshots from booking time."""

    id: str = Field(default_factory=new_id)
    service_id: str
    service_title: str
    client_id: str
    client_name: str
    freelancer_id: str
    freelancer_name: str
    status: BookingStatus = BookingStatus.PENDING
    message: str = ""
    price: float
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class BookingCreate(CamelModel):
    service_id: str
    message: str = ""
