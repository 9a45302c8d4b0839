"""User entity and auth/profile request schemas."""

from datetime import datetime
from enum import Enum

from pydantic import Field

from freelancehub.schemas.base import CamelModel, new_id, utcnow


class UserType(str, Enum):
    FREELANCER = "freelancer"
    CLIENT = "client"


class User(CamelModel):
    """Stored user record. user_type never changes after registration."""

    id: str = Field(default_factory=new_id)
    email: str
    full_name: str
    user_type: UserType
    bio: str = ""
    avatar_url: str = ""
    skills: list[str] = Field(default_factory=list)
    hourly_rate: float = 0
    created_at: datetime = Field(default_factory=utcnow)


class RegisterRequest(CamelModel):
    email: str = ""
    # Presence-only: the password is never stored or checked.
    password: str = ""
    full_name: str = ""
    user_type: str = UserType.CLIENT.value


class LoginRequest(CamelModel):
    email: str
    password: str = ""


class ProfileUpdate(CamelModel):
    """Profile form as submitted: skills and rate may arrive as raw strings."""

    full_name: str
    bio: str = ""
    skills: str | list[str] = ""
    hourly_rate: str | float | None = None
