"""Account registration and cookie-based login routes."""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.core.dependencies import get_current_user_required
from profile_api.core.errors import ConflictError, UnauthorizedError
from profile_api.core.security import create_access_token, get_password_hash, verify_password
from profile_api.db.session import get_db
from profile_api.models.user import User
from profile_api.schemas.auth import (
    RegisteredSchema,
    TokenSchema,
    UserLoginSchema,
    UserProfileSchema,
    UserRegistrationSchema,
)
from profile_api.schemas.journal import MessageResponse

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/register",
    response_model=RegisteredSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
)
async def register(
    payload: UserRegistrationSchema,
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(select(User).where(User.email == payload.email))
    if result.scalar_one_or_none() is not None:
        raise ConflictError("Email already registered")

    user = User(
        name=payload.name,
        email=payload.email,
        password_hash=get_password_hash(payload.password),
    )
    db.add(user)
    await db.commit()

    logger.info(f"Registered user {user.id}")
    return RegisteredSchema(message="User created", id=user.id)


@router.post(
    "/login",
    response_model=TokenSchema,
    summary="Log in",
    description="Verify credentials and set the access token as an HttpOnly cookie.",
)
async def login(
    payload: UserLoginSchema,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(select(User).where(User.email == payload.email))
    user = result.scalar_one_or_none()
    if user is None or not verify_password(payload.password, user.password_hash):
        logger.warning(f"Failed login for {payload.email}")
        raise UnauthorizedError("Invalid credentials")

    app_settings = request.app.state.settings
    lifetime = timedelta(minutes=app_settings.access_token_expires_min)
    token = create_access_token({"sub": user.id}, expires_delta=lifetime, settings=app_settings)

    response.set_cookie(
        key=app_settings.auth_cookie_name,
        value=token,
        max_age=int(lifetime.total_seconds()),
        httponly=True,
        samesite="lax",
        secure=app_settings.cookie_secure,
    )
    logger.info(f"User {user.id} logged in")
    return TokenSchema(token=token)


@router.post("/logout", response_model=MessageResponse, summary="Log out")
async def logout(request: Request, response: Response):
    response.delete_cookie(key=request.app.state.settings.auth_cookie_name)
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=UserProfileSchema, summary="Current user")
async def me(current_user: User = Depends(get_current_user_required)):
    return UserProfileSchema.model_validate(current_user)
