"""Owner-scoped CRUD for profile sub-resources.

Skills, experience, qualifications and certificates are flat rows keyed by a
server-assigned id and owned by ``user_id``. ``ResourceService`` performs one
store operation per call; the profile itself is one row per user and gets its
own small service.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.core.errors import ConflictError, NotFoundError
from profile_api.db.session import Base
from profile_api.models.profile import Profile

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class ResourceService(Generic[ModelT]):
    """CRUD on one sub-resource table for a given session."""

    def __init__(self, session: AsyncSession, model: Type[ModelT], id_field: str, label: str):
        self.session = session
        self.model = model
        self.id_field = id_field
        self.label = label

    @property
    def id_column(self):
        return getattr(self.model, self.id_field)

    async def _find(self, user_id: str, item_id: str) -> Optional[ModelT]:
        result = await self.session.execute(
            select(self.model).where(self.model.user_id == user_id, self.id_column == item_id)
        )
        return result.scalar_one_or_none()

    async def list(self, user_id: str) -> List[ModelT]:
        result = await self.session.execute(
            select(self.model).where(self.model.user_id == user_id).order_by(self.id_column)
        )
        return list(result.scalars().all())

    async def get(self, user_id: str, item_id: str) -> ModelT:
        item = await self._find(user_id, item_id)
        if item is None:
            raise NotFoundError(f"{self.label} not found")
        return item

    async def create(self, user_id: str, data: Dict[str, Any]) -> ModelT:
        item = self.model(user_id=user_id, **data)
        self.session.add(item)
        await self.session.commit()
        logger.info(f"Created {self.label.lower()} {getattr(item, self.id_field)} for user {user_id}")
        return item

    async def replace(self, user_id: str, item_id: str, data: Dict[str, Any]) -> ModelT:
        """Overwrite the fields of an item, creating it under ``item_id`` if missing."""
        item = await self._find(user_id, item_id)
        if item is None:
            # The id may already belong to another user
            if await self.session.get(self.model, item_id) is not None:
                raise ConflictError()
            item = self.model(user_id=user_id, **{self.id_field: item_id})
            self.session.add(item)
            logger.info(f"Upserting new {self.label.lower()} {item_id} for user {user_id}")

        for field, value in data.items():
            setattr(item, field, value)

        await self.session.commit()
        return item

    async def set_field(self, user_id: str, item_id: str, field: str, value: Any) -> ModelT:
        return await self.replace(user_id, item_id, {field: value})

    async def delete(self, user_id: str, item_id: str) -> bool:
        """Delete an owned item. Missing items are not an error."""
        result = await self.session.execute(
            delete(self.model).where(self.model.user_id == user_id, self.id_column == item_id)
        )
        await self.session.commit()
        deleted = result.rowcount > 0
        if deleted:
            logger.info(f"Deleted {self.label.lower()} {item_id} of user {user_id}")
        return deleted


class ProfileService:
    """One profile row per user."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, user_id: str) -> Profile:
        profile = await self.session.get(Profile, user_id)
        if profile is None:
            raise NotFoundError("Profile not found")
        return profile

    async def create(self, user_id: str, data: Dict[str, Any]) -> Profile:
        if await self.session.get(Profile, user_id) is not None:
            raise ConflictError("Profile already exists")

        profile = Profile(user_id=user_id, **data)
        self.session.add(profile)
        await self.session.commit()
        logger.info(f"Created profile for user {user_id}")
        return profile

    async def upsert(self, user_id: str, data: Dict[str, Any]) -> Profile:
        profile = await self.session.get(Profile, user_id)
        if profile is None:
            profile = Profile(user_id=user_id)
            self.session.add(profile)

        for field, value in data.items():
            setattr(profile, field, value)

        await self.session.commit()
        logger.info(f"Saved profile for user {user_id}")
        return profile
