# server/core/security.py

from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext
from config import Settings
from core.exceptions import InvalidTokenError


pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def issue_token(user_id: str, settings: Settings, expires_delta: timedelta | None = None) -> str:
    """
    Signs a session token carrying the user id.
    Expiry defaults to the configured token lifetime.
    """
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.token_expire_minutes))
    to_encode = {"id": user_id, "exp": expire}
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: Settings) -> str:
    """
    Returns the user id bound to the token.
    Raises InvalidTokenError on a bad signature, an expired token or a payload without an id.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        raise InvalidTokenError()

    user_id = payload.get("id")
    if not isinstance(user_id, str) or not user_id:
        raise InvalidTokenError()
    return user_id
