"""
Request-scoped authentication for routes that create or delete content.
"""
import logging
from typing import Optional

import jwt
from fastapi import Cookie, Depends, HTTPException, status
from sqlalchemy.orm import Session

from .auth import decode_access_token
from .config import settings
from .db import get_db
from .models import User

logger = logging.getLogger(__name__)


def get_current_user_id(
    token: Optional[str] = Cookie(default=None, alias=settings.AUTH_COOKIE_NAME),
) -> int:
    """
    Resolve the authenticated user id from the auth cookie.

    Raises:
        HTTPException: 401 when the cookie is missing, 403 when the token is
            tampered with or expired
    """
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Access denied. Please log in.")
    try:
        return decode_access_token(token)
    except jwt.InvalidTokenError as exc:
        logger.info("Rejected auth cookie: %s", exc)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid or expired token.") from exc


def get_current_user(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> User:
    """Load the authenticated user; a token for a user that no longer exists is rejected with 401."""
    user = db.get(User, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user
