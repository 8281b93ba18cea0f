"""
Users router - registration, login/logout and the public user list.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from ..auth import clear_auth_cookie, create_access_token, hash_password, set_auth_cookie, verify_password
from ..db import get_db
from ..models import User
from ..schemas import MessageResponse, RegistrationResponse, UserLogin, UserOut, UserRegister
from ..utils.event_logger import log_activity

router = APIRouter(tags=["users"])
logger = logging.getLogger(__name__)


@router.get("/users", response_model=List[UserOut])
def list_users(db: Session = Depends(get_db)):
    try:
        return db.query(User).order_by(User.id).all()
    except Exception as e:
        logger.exception("Failed to list users")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list users"
        ) from e


@router.post("/register", response_model=RegistrationResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: Request,
    payload: Optional[UserRegister] = None,
    db: Session = Depends(get_db)
):
    # An absent body is treated like an empty one so it fails the field checks below
    payload = payload or UserRegister()
    if not payload.email or not payload.password or not payload.verified_password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email, password and password verification are required"
        )
    if payload.password != payload.verified_password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Passwords do not match")

    try:
        new_user = User(
            email=payload.email,
            username=payload.username,
            password=hash_password(payload.password)
        )
        db.add(new_user)
        db.commit()
        db.refresh(new_user)
    except Exception as e:
        # A duplicate email surfaces here as a unique constraint violation
        db.rollback()
        logger.exception("Registration failed for email=%s", payload.email)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Failed to create user", "error": str(e)}
        ) from e

    log_activity("register", request, user_id=new_user.id)
    return RegistrationResponse(message="User registered successfully", user_id=new_user.id)


@router.post("/login", response_model=MessageResponse)
def login(
    request: Request,
    response: Response,
    credentials: Optional[UserLogin] = None,
    db: Session = Depends(get_db)
):
    credentials = credentials or UserLogin()
    if not credentials.email or not credentials.password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email and password are required")

    try:
        user = db.query(User).filter(User.email == credentials.email).first()
        valid = user is not None and verify_password(credentials.password, user.password)
    except Exception as e:
        logger.exception("Login lookup failed for email=%s", credentials.email)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Login failed", "error": str(e)}
        ) from e

    # Same answer for unknown email and wrong password
    if not valid:
        log_activity("login_failure", request, user_id=user.id if user else None)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")

    set_auth_cookie(response, create_access_token(user.id))
    log_activity("login_success", request, user_id=user.id)
    return MessageResponse(message="Logged in successfully")


@router.post("/logout", response_model=MessageResponse)
def logout(request: Request, response: Response):
    clear_auth_cookie(response)
    log_activity("logout", request)
    return MessageResponse(message="Logged out successfully")
