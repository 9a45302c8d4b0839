"""
Auth endpoints - register, login, logout, current user.
Design: Thin controller; AuthService holds the rules. Login is by email only.
"""

from fastapi import APIRouter, HTTPException, status

from freelancehub.core.dependencies import CurrentUser, RepositoryDep
from freelancehub.schemas.user import LoginRequest, RegisterRequest, User
from freelancehub.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED)
async def register(repo: RepositoryDep, data: RegisterRequest):
    """Create a user and log them in."""
    return await AuthService(repo).register(
        email=data.email,
        password=data.password,
        full_name=data.full_name,
        user_type=data.user_type,
    )


@router.post("/login", response_model=User)
async def login(repo: RepositoryDep, data: LoginRequest):
    return await AuthService(repo).login(data.email, data.password)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(repo: RepositoryDep):
    await AuthService(repo).logout()


@router.get("/me", response_model=User)
async def me(user: CurrentUser):
    return user
