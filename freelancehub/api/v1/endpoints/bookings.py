"""
Booking endpoints - clients book services, freelancers move bookings along.
"""

from fastapi import APIRouter, status

from freelancehub.core.dependencies import CurrentUser, RepositoryDep
from freelancehub.schemas.booking import Booking, BookingCreate
from freelancehub.services.booking_service import BookingService

router = APIRouter()


@router.post("", response_model=Booking, status_code=status.HTTP_201_CREATED)
async def book_service(repo: RepositoryDep, user: CurrentUser, data: BookingCreate):
    return await BookingService(repo).book(user.id, data.service_id, data.message)


@router.get("", response_model=list[Booking])
async def my_bookings(repo: RepositoryDep, user: CurrentUser):
    """Bookings made by a client, or received by a freelancer."""
    return await BookingService(repo).list_for_user(user)


@router.post("/{booking_id}/accept", response_model=Booking)
async def accept_booking(repo: RepositoryDep, user: CurrentUser, booking_id: str):
    return await BookingService(repo).accept(user.id, booking_id)


@router.post("/{booking_id}/decline", response_model=Booking)
async def decline_booking(repo: RepositoryDep, user: CurrentUser, booking_id: str):
    return await BookingService(repo).decline(user.id, booking_id)


@router.post("/{booking_id}/complete", response_model=Booking)
async def complete_booking(repo: RepositoryDep, user: CurrentUser, booking_id: str):
    return await BookingService(repo).complete(user.id, booking_id)
