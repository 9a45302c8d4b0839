"""
Profile endpoint - freelancer profile form.
"""

from fastapi import APIRouter

from freelancehub.core.dependencies import CurrentUser, RepositoryDep
from freelancehub.schemas.user import ProfileUpdate, User
from freelancehub.services.profile_service import ProfileService

router = APIRouter()


@router.put("", response_model=User)
async def update_profile(repo: RepositoryDep, user: CurrentUser, data: ProfileUpdate):
    return await ProfileService(repo).update_profile(user.id, data)
