"""Profile API routes."""

import logging

from fastapi import APIRouter, Depends, File, Request, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.api.resources import save_upload
from profile_api.core.dependencies import ensure_owner, get_current_user_required, get_image_store
from profile_api.db.session import get_db
from profile_api.models.user import User
from profile_api.schemas.profile import ProfileImageResponse, ProfilePayload, ProfileResponse
from profile_api.services.resource_service import ProfileService
from profile_api.services.storage_service import ImageStore

# Configure logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/profile", tags=["profile"])


def get_profile_service(db: AsyncSession = Depends(get_db)) -> ProfileService:
    return ProfileService(db)


@router.get(
    "/{user_id}",
    response_model=ProfileResponse,
    summary="Get a profile",
)
async def get_profile(
    user_id: str,
    service: ProfileService = Depends(get_profile_service),
):
    profile = await service.get(user_id)
    return ProfileResponse.model_validate(profile)


@router.post(
    "/{user_id}",
    response_model=ProfileResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a profile",
)
async def create_profile(
    user_id: str,
    payload: ProfilePayload,
    current_user: User = Depends(get_current_user_required),
    service: ProfileService = Depends(get_profile_service),
):
    ensure_owner(user_id, current_user)
    profile = await service.create(user_id, payload.model_dump())
    return ProfileResponse.model_validate(profile)


@router.put(
    "/{user_id}",
    response_model=ProfileResponse,
    summary="Create or replace a profile",
)
async def upsert_profile(
    user_id: str,
    payload: ProfilePayload,
    current_user: User = Depends(get_current_user_required),
    service: ProfileService = Depends(get_profile_service),
):
    ensure_owner(user_id, current_user)
    profile = await service.upsert(user_id, payload.model_dump())
    return ProfileResponse.model_validate(profile)


@router.put(
    "/{user_id}/image",
    response_model=ProfileImageResponse,
    summary="Upload a profile image",
    description="Store the image and save its URL as the profile image.",
)
async def upload_profile_image(
    request: Request,
    user_id: str,
    profile_image: UploadFile = File(..., alias="profileImage"),
    current_user: User = Depends(get_current_user_required),
    store: ImageStore = Depends(get_image_store),
    service: ProfileService = Depends(get_profile_service),
):
    ensure_owner(user_id, current_user)
    url = await save_upload(request, store, user_id, profile_image)
    await service.upsert(user_id, {"profile_img": url})
    logger.info(f"Profile image for {user_id} stored at {url}")
    return ProfileImageResponse(profile_image=url)
