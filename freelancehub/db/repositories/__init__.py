# Repository pattern: all persisted state goes through these classes

from freelancehub.db.repositories.booking_repository import BookingRepository
from freelancehub.db.repositories.repository import Repository
from freelancehub.db.repositories.service_repository import ServiceRepository
from freelancehub.db.repositories.session_repository import SessionRepository
from freelancehub.db.repositories.user_repository import UserRepository

__all__ = [
    "Repository",
    "UserRepository",
    "ServiceRepository",
    "BookingRepository",
    "SessionRepository",
]
