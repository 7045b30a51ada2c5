"""API routes for the Profile API."""

from profile_api.api.routes import api_router
from profile_api.api.auth import router as auth_router
from profile_api.api.journal import router as journal_router
from profile_api.api.profile import router as profile_router

__all__ = [
    "api_router",
    "auth_router",
    "journal_router",
    "profile_router",
]
