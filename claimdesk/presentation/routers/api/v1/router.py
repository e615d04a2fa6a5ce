"""Assembled API v1 router."""

from fastapi import APIRouter

from claimdesk.core.config import settings
from claimdesk.presentation.routers.api.v1.auth import router as auth_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(auth_router)

__all__ = [
    "v1_router",
]
