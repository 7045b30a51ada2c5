"""
Authentication and service dependencies for FastAPI.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.core.errors import ForbiddenError, UnauthorizedError
from profile_api.core.security import decode_token
from profile_api.db.session import get_db
from profile_api.models.user import User
from profile_api.services.journal_service import JournalService
from profile_api.services.storage_service import ImageStore

# The token normally travels in the cookie named by the app settings;
# a bearer header is accepted too
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> Optional[User]:
    """
    Get the current authenticated user from the JWT token.
    Returns None if not authenticated (allows anonymous access).
    """
    app_settings = request.app.state.settings
    cookie_token = request.cookies.get(app_settings.auth_cookie_name)
    token = cookie_token or (credentials.credentials if credentials else None)
    if not token:
        return None

    payload = decode_token(token, expected_type="access", settings=app_settings)
    if not payload:
        return None

    user_id = payload.get("sub")
    if not user_id:
        return None

    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_current_user_required(
    current_user: Optional[User] = Depends(get_current_user),
) -> User:
    """
    Get the current authenticated user. Raises 401 if not authenticated.
    """
    if not current_user:
        raise UnauthorizedError()
    return current_user


def ensure_owner(user_id: str, current_user: User) -> None:
    """Reject writes to another user's resources."""
    if current_user.id != user_id:
        raise ForbiddenError()


def get_journal_service(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> JournalService:
    return JournalService(db, strict_status=request.app.state.settings.journal_strict_status)


def get_image_store(request: Request) -> ImageStore:
    return request.app.state.image_store
