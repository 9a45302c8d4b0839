"""
FastAPI dependencies - repository injection and the acting user (Dependency Inversion).
Challenge: One repository per process; the acting user always comes from the session pointer.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from freelancehub.db.repositories import Repository
from freelancehub.schemas.user import User


def get_repository(request: Request) -> Repository:
    """The process-wide repository built by ``create_app``."""
    return request.app.state.repository


RepositoryDep = Annotated[Repository, Depends(get_repository)]


async def get_current_user(repo: RepositoryDep) -> User:
    """Resolve the session pointer. Raises 401 when nobody is logged in."""
    user = await repo.session.get()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not logged in",
        )
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
