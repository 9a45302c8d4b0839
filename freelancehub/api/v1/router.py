"""
API v1 router - aggregates all endpoint modules.
"""

from fastapi import APIRouter

from freelancehub.api.v1.endpoints import auth, bookings, health, profile, services

api_router = APIRouter(prefix="/v1")

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(services.router, prefix="/services", tags=["services"])
api_router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
