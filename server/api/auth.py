# server/api/auth.py

import logging
from pydantic import BaseModel, EmailStr, Field
from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session
from api.deps import get_app_settings
from config import Settings
from core import accounts
from core.exceptions import AuthenticationError, BadCredentialError, UserNotFoundError
from core.projections import user_public
from core.security import issue_token, verify_token
from database import get_db
from models.user import User


logger = logging.getLogger(__name__)

COOKIE_NAME = "token"

router = APIRouter(prefix="/user", tags=["auth"])


class RegisterRequest(BaseModel):
    first_name: str = Field(..., alias="firstName", min_length=3, max_length=15)
    last_name: str = Field(..., alias="lastName", min_length=3, max_length=15)
    email: EmailStr
    password: str = Field(..., min_length=8)


class LoginRequest(BaseModel):
    email: str
    password: str


# -------------------------------
# Session Cookie
# -------------------------------

def set_session_cookie(response: Response, token: str, settings: Settings):
    response.set_cookie(
        key=COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        max_age=settings.token_expire_minutes * 60,
    )


def clear_session_cookie(response: Response, settings: Settings):
    response.delete_cookie(
        key=COOKIE_NAME,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


# -------------------------------
# Authorization Gate
# -------------------------------

def get_current_user_id(request: Request, settings: Settings = Depends(get_app_settings)) -> str:
    """
    Reads the session cookie and returns the verified user id.
    """
    token = request.cookies.get(COOKIE_NAME)
    if not token:
        raise AuthenticationError("Access denied. No token found in cookies.")
    user_id = verify_token(token, settings)
    request.state.user_id = user_id
    return user_id


def get_current_user(user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)) -> User:
    return accounts.get_user(db, user_id)


# -------------------------------
# Auth Endpoints
# -------------------------------

@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    user = accounts.register(db, payload.first_name, payload.last_name, payload.email, payload.password)
    set_session_cookie(response, issue_token(user.id, settings), settings)
    return {"message": "User registered successfully.", "data": user_public(user)}


@router.post("/login")
def login(
    payload: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    try:
        user = accounts.authenticate(db, payload.email, payload.password)
    except (UserNotFoundError, BadCredentialError):
        logger.info("Failed login attempt")
        if settings.mask_login_failures:
            raise AuthenticationError("Invalid email or password.")
        raise

    set_session_cookie(response, issue_token(user.id, settings), settings)
    logger.info("User %s logged in", user.id)
    return {"message": "User logged in successfully.", "data": user_public(user)}


@router.get("/logout")
def logout(response: Response, settings: Settings = Depends(get_app_settings)):
    clear_session_cookie(response, settings)
    return {"message": "User logged out successfully."}
