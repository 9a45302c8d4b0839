"""
Profile service - freelancer profile edits.
Design: Edits never reach the name snapshots held by services and bookings.
"""

import logging
import math
from collections.abc import Sequence

from freelancehub.core.errors import NotFoundError, ValidationError
from freelancehub.db.repositories import Repository
from freelancehub.schemas.user import ProfileUpdate, User, UserType
from freelancehub.services.base import load_actor, parse_input

logger = logging.getLogger(__name__)


def parse_skills(raw: str | Sequence[str] | None) -> list[str]:
    """'a, b,,c ' -> ['a', 'b', 'c']. Order kept, blanks dropped."""
    if raw is None:
        return []
    parts = raw.split(",") if isinstance(raw, str) else raw
    return [part.strip() for part in parts if part and part.strip()]


def parse_hourly_rate(raw: str | float | int | None) -> float:
    """Numeric rate; anything unparsable (or NaN/inf) becomes 0."""
    if raw is None or isinstance(raw, bool):
        return 0.0
    try:
        rate = float(raw)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(rate):
        return 0.0
    if rate < 0:
        raise ValidationError("Hourly rate cannot be negative")
    return rate


class ProfileService:
    def __init__(self, repo: Repository):
        self.repo = repo

    async def update_profile(self, actor_id: str, form: ProfileUpdate | dict) -> User:
        """Replace name, bio, skills and rate of the actor's own profile."""
        actor = await load_actor(self.repo, actor_id, UserType.FREELANCER)
        form = parse_input(ProfileUpdate, form)
        if not form.full_name.strip():
            raise ValidationError("Full name is required")

        fields = {
            "full_name": form.full_name.strip(),
            "bio": form.bio,
            "skills": parse_skills(form.skills),
            "hourly_rate": parse_hourly_rate(form.hourly_rate),
        }
        updated = await self.repo.users.update(actor.id, fields)
        if updated is None:
            raise NotFoundError(f"User {actor.id} not found")

        # Keep the persisted session record in step with the edit
        snapshot = await self.repo.session.get_snapshot()
        if snapshot is not None and snapshot.id == updated.id:
            await self.repo.session.set(updated)
        logger.info("Profile of %s updated", updated.id)
        return updated
