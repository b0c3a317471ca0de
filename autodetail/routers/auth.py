"""
Login, logout and current-user routes.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from autodetail.auth import authenticate, create_session, delete_session, get_current_user
from autodetail.config import get_settings
from autodetail.database import get_db
from autodetail.models.user import User
from autodetail.schemas.user import LoginRequest, User as UserSchema

logger = logging.getLogger(__name__)

settings = get_settings()

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=UserSchema)
async def login(
    credentials: LoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_db)
):
    """
    Log in with email and password and start a cookie session.
    """
    user = await authenticate(db, credentials.email, credentials.password)
    if user is None:
        logger.warning("Failed login for %s", credentials.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )

    token = await create_session(db, user)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_expire_minutes * 60,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    logger.info("User %s logged in", user.email)
    return user


@router.post("/logout")
async def logout(
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db)
):
    """
    End the current session. Safe to call when not logged in.
    """
    await delete_session(db, request.cookies.get(settings.session_cookie_name))
    response.delete_cookie(settings.session_cookie_name)
    return {"message": "Logged out"}


@router.get("/user", response_model=UserSchema)
async def read_current_user(current_user: User = Depends(get_current_user)):
    """
    Return the logged-in user.
    """
    return current_user
