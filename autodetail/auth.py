"""
Session-based authentication.

A successful login stores an opaque random token in the user_sessions table and
hands it to the browser as a cookie. Protected routes depend on
get_current_user, which resolves the cookie back to a user or answers 401.
"""
import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional

import bcrypt
from fastapi import Depends, HTTPException, Request, status
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from autodetail.config import get_settings
from autodetail.database import get_db
from autodetail.models.user import User, UserSession

logger = logging.getLogger(__name__)

settings = get_settings()


def hash_password(password: str) -> str:
    """Hash a password with bcrypt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Check a password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Not a bcrypt hash
        return False


async def authenticate(db: AsyncSession, email: str, password: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()
    if user is None or not user.is_active:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


async def create_session(db: AsyncSession, user: User) -> str:
    """Open a session for user and return its token."""
    token = secrets.token_urlsafe(32)
    expires_at = datetime.utcnow() + timedelta(minutes=settings.session_expire_minutes)
    db.add(UserSession(user_id=user.id, token=token, expires_at=expires_at))
    await db.commit()
    return token


async def delete_session(db: AsyncSession, token: Optional[str]):
    if not token:
        return
    await db.execute(delete(UserSession).where(UserSession.token == token))
    await db.commit()


async def get_session_user(db: AsyncSession, token: Optional[str]) -> Optional[User]:
    """Return the user owning a live session token, or None."""
    if not token:
        return None
    result = await db.execute(
        select(User)
        .join(UserSession, UserSession.user_id == User.id)
        .where(UserSession.token == token, UserSession.expires_at > datetime.utcnow())
    )
    user = result.scalar_one_or_none()
    if user is None or not user.is_active:
        return None
    return user


async def cleanup_expired_sessions(db: AsyncSession) -> int:
    """Delete expired sessions; returns how many were removed."""
    result = await db.execute(delete(UserSession).where(UserSession.expires_at <= datetime.utcnow()))
    await db.commit()
    if result.rowcount:
        logger.info("Cleaned up %d expired sessions", result.rowcount)
    return result.rowcount or 0


async def seed_default_user(db: AsyncSession):
    """Create the default login if it doesn't exist yet."""
    result = await db.execute(select(User).where(User.email == settings.default_user_email))
    if result.scalar_one_or_none() is not None:
        return
    db.add(User(
        email=settings.default_user_email,
        hashed_password=hash_password(settings.default_user_password),
        name="Administrator",
    ))
    await db.commit()
    logger.info("Seeded default user: %s", settings.default_user_email)


async def get_current_user(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Dependency to get the logged-in user.

    Usage in routes:
        current_user: User = Depends(get_current_user)
    """
    token = request.cookies.get(settings.session_cookie_name)
    user = await get_session_user(db, token)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user
