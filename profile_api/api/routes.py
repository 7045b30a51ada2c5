"""Main API router that combines all route modules."""

import logging
from fastapi import APIRouter, Request

from profile_api.api.auth import router as auth_router
from profile_api.api.journal import router as journal_router
from profile_api.api.profile import router as profile_router
from profile_api.api.resources import (
    certificates_router,
    experience_router,
    qualifications_router,
    skills_router,
)

logger = logging.getLogger(__name__)

# Create main API router; create_app mounts it under settings.api_prefix
api_router = APIRouter()

# Include all route modules
api_router.include_router(auth_router)
api_router.include_router(journal_router)
api_router.include_router(profile_router)
api_router.include_router(skills_router)
api_router.include_router(experience_router)
api_router.include_router(qualifications_router)
api_router.include_router(certificates_router)


@api_router.get("/health", tags=["health"])
async def health_check(request: Request):
    """Health check endpoint"""
    return {"status": "healthy", "service": request.app.state.settings.app_name}
