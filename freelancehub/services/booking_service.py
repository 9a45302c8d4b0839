"""
Business logic for bookings.

``BookingService`` places bookings on active services and moves them
through the status machine (pending -> accepted -> completed, or
pending -> cancelled). Title, names and price are copied from the
service and the client at booking time and never refreshed, so later
edits or deletion of the service leave existing bookings untouched.
Only the freelancer who owns a booking may change its status.
"""

import logging
from typing import Any

from freelancehub.core.errors import (
    InvalidTransitionError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from freelancehub.core.metrics import BOOKING_TRANSITIONS, BOOKINGS_CREATED
from freelancehub.db.repositories import Repository
from freelancehub.schemas.base import utcnow
from freelancehub.schemas.booking import Booking, BookingStatus, can_transition
from freelancehub.schemas.user import User, UserType
from freelancehub.services.base import Clock, load_actor

logger = logging.getLogger(__name__)


class BookingService:
    """Service for placing bookings and changing their status."""

    def __init__(self, repo: Repository, clock: Clock = utcnow):
        self.repo = repo
        self.clock = clock

    async def book(self, client_id: str, service_id: str, message: str = "") -> Booking:
        """Book an active service for a client.

        Raises ``NotFoundError`` if the client or service does not
        exist, ``PermissionDeniedError`` if the booker is not a client
        and ``ValidationError`` if the service is not active.
        """
        client = await load_actor(self.repo, client_id, UserType.CLIENT)
        service = await self.repo.services.get_by_id(service_id)
        if service is None:
            raise NotFoundError(f"Service {service_id} not found")
        if not service.is_active:
            raise ValidationError("This service is not available for booking")

        now = self.clock()
        booking = Booking(
            service_id=service.id,
            service_title=service.title,
            client_id=client.id,
            client_name=client.full_name,
            freelancer_id=service.freelancer_id,
            freelancer_name=service.freelancer_name,
            status=BookingStatus.PENDING,
            message=message or "",
            price=service.price,
            created_at=now,
            updated_at=now,
        )
        await self.repo.bookings.insert(booking)
        BOOKINGS_CREATED.inc()
        logger.info("Client %s booked service %s (booking %s)", client.id, service.id, booking.id)
        return booking

    async def transition(self, actor_id: str, booking_id: str, status: BookingStatus | str) -> Booking:
        """Move a booking to ``status`` if the status machine allows it.

        Only ``updated_at`` changes besides the status.
        """
        try:
            target = BookingStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown booking status {status!r}") from None

        booking = await self.repo.bookings.get_by_id(booking_id)
        if booking is None:
            raise NotFoundError(f"Booking {booking_id} not found")
        if booking.freelancer_id != actor_id:
            raise PermissionDeniedError("Only the freelancer of this booking can change its status")
        if not can_transition(booking.status, target):
            raise InvalidTransitionError(
                f"Cannot move booking from {booking.status.value} to {target.value}"
            )

        fields: dict[str, Any] = {"status": target, "updated_at": self.clock()}
        updated = await self.repo.bookings.update(booking_id, fields)
        if updated is None:
            raise NotFoundError(f"Booking {booking_id} not found")
        BOOKING_TRANSITIONS.labels(status=target.value).inc()
        logger.info("Booking %s: %s -> %s", booking_id, booking.status.value, target.value)
        return updated

    async def accept(self, actor_id: str, booking_id: str) -> Booking:
        return await self.transition(actor_id, booking_id, BookingStatus.ACCEPTED)

    async def decline(self, actor_id: str, booking_id: str) -> Booking:
        return await self.transition(actor_id, booking_id, BookingStatus.CANCELLED)

    async def complete(self, actor_id: str, booking_id: str) -> Booking:
        return await self.transition(actor_id, booking_id, BookingStatus.COMPLETED)

    async def list_for_client(self, client_id: str) -> list[Booking]:
        return await self.repo.bookings.list_by_client(client_id)

    async def list_for_freelancer(self, freelancer_id: str) -> list[Booking]:
        return await self.repo.bookings.list_by_freelancer(freelancer_id)

    async def list_for_user(self, user: User) -> list[Booking]:
        """Bookings a user sees on their dashboard, chosen by role."""
        if user.user_type == UserType.FREELANCER:
            return await self.list_for_freelancer(user.id)
        return await self.list_for_client(user.id)
