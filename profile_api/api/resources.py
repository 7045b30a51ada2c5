"""Routes for owner-scoped profile sub-resources.

Skills, experience, qualifications and certificates share one route shape,
so their routers are built by ``build_resource_router``.
"""

import logging
from typing import List, Type

from fastapi import APIRouter, Depends, File, Request, UploadFile, status
from google.cloud.exceptions import GoogleCloudError
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.core.dependencies import ensure_owner, get_current_user_required, get_image_store
from profile_api.core.errors import BadRequestError, InternalError
from profile_api.db.session import get_db
from profile_api.models.profile import Certificate, Experience, Qualification, Skill
from profile_api.models.user import User
from profile_api.schemas.journal import MessageResponse
from profile_api.schemas.profile import (
    CertImageResponse,
    CertificateResponse,
    CredentialPayload,
    ExperiencePayload,
    ExperienceResponse,
    QualificationResponse,
    SkillPayload,
    SkillResponse,
)
from profile_api.services.resource_service import ResourceService
from profile_api.services.storage_service import ImageStore

logger = logging.getLogger(__name__)


async def save_upload(request: Request, store: ImageStore, owner_id: str, file: UploadFile) -> str:
    """Validate an uploaded image and hand it to the image store."""
    if not file.content_type or not file.content_type.startswith("image/"):
        raise BadRequestError("File must be an image")

    max_bytes = request.app.state.settings.upload_max_size_mb * 1024 * 1024
    if file.size is not None and file.size > max_bytes:
        raise BadRequestError("File too large")

    try:
        return await store.save_image(owner_id, file.filename or "upload", file.file, file.content_type)
    except (OSError, GoogleCloudError) as e:
        logger.error(f"Failed to store image for {owner_id}: {e}")
        raise InternalError("Could not store image")


def build_resource_router(
    *,
    prefix: str,
    tag: str,
    model: Type,
    id_field: str,
    label: str,
    payload_schema: Type[BaseModel],
    response_schema: Type[BaseModel],
    with_cert_image: bool = False,
) -> APIRouter:
    """
    Build list/get/create/replace/delete routes for one sub-resource.

    Args:
        prefix: URL prefix, e.g. ``/skills``
        tag: OpenAPI tag
        model: SQLAlchemy model with ``user_id`` and ``id_field`` columns
        id_field: Name of the primary key column
        label: Human-readable name used in messages
        payload_schema: Request body schema
        response_schema: Response schema, validated from the model
        with_cert_image: Also expose ``PUT /{user_id}/{item_id}/cert_image``

    Returns:
        APIRouter with the routes registered
    """
    router = APIRouter(prefix=prefix, tags=[tag])

    def get_service(db: AsyncSession = Depends(get_db)) -> ResourceService:
        return ResourceService(db, model, id_field, label)

    @router.get("/{user_id}", response_model=List[response_schema], summary=f"List {tag}")
    async def list_items(user_id: str, service: ResourceService = Depends(get_service)):
        items = await service.list(user_id)
        return [response_schema.model_validate(item) for item in items]

    @router.get("/{user_id}/{item_id}", response_model=response_schema, summary=f"Get one {label.lower()}")
    async def get_item(user_id: str, item_id: str, service: ResourceService = Depends(get_service)):
        item = await service.get(user_id, item_id)
        return response_schema.model_validate(item)

    @router.post(
        "/{user_id}",
        response_model=response_schema,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create a {label.lower()}",
    )
    async def create_item(
        user_id: str,
        payload: payload_schema,
        current_user: User = Depends(get_current_user_required),
        service: ResourceService = Depends(get_service),
    ):
        ensure_owner(user_id, current_user)
        item = await service.create(user_id, payload.model_dump())
        return response_schema.model_validate(item)

    @router.put("/{user_id}/{item_id}", response_model=response_schema, summary=f"Replace a {label.lower()}")
    async def replace_item(
        user_id: str,
        item_id: str,
        payload: payload_schema,
        current_user: User = Depends(get_current_user_required),
        service: ResourceService = Depends(get_service),
    ):
        ensure_owner(user_id, current_user)
        item = await service.replace(user_id, item_id, payload.model_dump())
        return response_schema.model_validate(item)

    @router.delete("/{user_id}/{item_id}", response_model=MessageResponse, summary=f"Delete a {label.lower()}")
    async def delete_item(
        user_id: str,
        item_id: str,
        current_user: User = Depends(get_current_user_required),
        service: ResourceService = Depends(get_service),
    ):
        ensure_owner(user_id, current_user)
        await service.delete(user_id, item_id)
        return MessageResponse(message=f"{label} deleted")

    if with_cert_image:
        @router.put(
            "/{user_id}/{item_id}/cert_image",
            response_model=CertImageResponse,
            summary=f"Upload a {label.lower()} image",
        )
        async def upload_cert_image(
            request: Request,
            user_id: str,
            item_id: str,
            file: UploadFile = File(...),
            current_user: User = Depends(get_current_user_required),
            store: ImageStore = Depends(get_image_store),
            service: ResourceService = Depends(get_service),
        ):
            ensure_owner(user_id, current_user)
            url = await save_upload(request, store, user_id, file)
            await service.set_field(user_id, item_id, "cert_image", url)
            return CertImageResponse(cert_image=url)

    return router


skills_router = build_resource_router(
    prefix="/skills",
    tag="skills",
    model=Skill,
    id_field="skill_id",
    label="Skill",
    payload_schema=SkillPayload,
    response_schema=SkillResponse,
)

experience_router = build_resource_router(
    prefix="/experience",
    tag="experience",
    model=Experience,
    id_field="experience_id",
    label="Experience",
    payload_schema=ExperiencePayload,
    response_schema=ExperienceResponse,
)

qualifications_router = build_resource_router(
    prefix="/qualifications",
    tag="qualifications",
    model=Qualification,
    id_field="qualification_id",
    label="Qualification",
    payload_schema=CredentialPayload,
    response_schema=QualificationResponse,
    with_cert_image=True,
)

certificates_router = build_resource_router(
    prefix="/certificates",
    tag="certificates",
    model=Certificate,
    id_field="certificate_id",
    label="Certificate",
    payload_schema=CredentialPayload,
    response_schema=CertificateResponse,
    with_cert_image=True,
)
