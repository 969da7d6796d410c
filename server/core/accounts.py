# server/core/accounts.py

import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from core.exceptions import (
    BadCredentialError,
    ConflictError,
    UserNotFoundError,
    ValidationError,
)
from core.security import get_password_hash, verify_password
from models.user import User


logger = logging.getLogger(__name__)

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 15
PASSWORD_MIN_LENGTH = 8
BIO_MIN_LENGTH = 10
BIO_MAX_LENGTH = 100

RELATIONSHIP_STATUSES = ("Single", "In a relationship", "Married", "It's complicated")


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def _check_name(label: str, value: str) -> str:
    value = (value or "").strip()
    if not NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH:
        raise ValidationError(
            f"{label} must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters.",
            field=label,
        )
    return value


# -------------------------------
# Registration & Login
# -------------------------------

def register(db: Session, first_name: str, last_name: str, email: str, password: str) -> User:
    """
    Creates a user with a bcrypt-hashed password.
    Raises ConflictError when the email is already taken.
    """
    first_name = _check_name("firstName", first_name)
    last_name = _check_name("lastName", last_name)
    email = normalize_email(email)
    if "@" not in email:
        raise ValidationError("A valid email is required.", field="email")
    if len(password or "") < PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters.", field="password"
        )

    if db.query(User).filter(User.email == email).first():
        raise ConflictError("User already exists with this email.")

    user = User(
        first_name=first_name,
        last_name=last_name,
        email=email,
        password_hash=get_password_hash(password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("User already exists with this email.")
    db.refresh(user)

    logger.info("Registered user %s", user.id)
    return user


def authenticate(db: Session, email: str, password: str) -> User:
    user = db.query(User).filter(User.email == normalize_email(email)).first()
    if not user:
        raise UserNotFoundError()
    if not verify_password(password or "", user.password_hash):
        raise BadCredentialError()
    return user


# -------------------------------
# Lookup
# -------------------------------

def get_user(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if not user:
        raise UserNotFoundError()
    return user


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.created_at).all()


# -------------------------------
# Profile
# -------------------------------

def validate_profile(bio: str | None = None, relationship_status: str | None = None):
    """
    Raises ValidationError for a bio or relationship status outside the profile rules.
    """
    if bio is not None and not BIO_MIN_LENGTH <= len(bio.strip()) <= BIO_MAX_LENGTH:
        raise ValidationError(
            f"Bio must be between {BIO_MIN_LENGTH} and {BIO_MAX_LENGTH} characters.", field="bio"
        )
    if relationship_status is not None and relationship_status not in RELATIONSHIP_STATUSES:
        raise ValidationError(
            f"relationshipStatus must be one of: {', '.join(RELATIONSHIP_STATUSES)}.",
            field="relationshipStatus",
        )


def update_profile(
    db: Session,
    user: User,
    bio: str | None = None,
    work_at: str | None = None,
    address: str | None = None,
    relationship_status: str | None = None,
    profile_image: str | None = None,
    cover_image: str | None = None,
) -> User:
    """
    Applies the provided profile fields; None leaves a field unchanged.
    """
    validate_profile(bio, relationship_status)

    if bio is not None:
        user.bio = bio.strip()
    if relationship_status is not None:
        user.relationship_status = relationship_status
    if work_at is not None:
        user.work_at = work_at.strip()
    if address is not None:
        user.address = address.strip()
    if profile_image is not None:
        user.profile_image = profile_image
    if cover_image is not None:
        user.cover_image = cover_image

    db.commit()
    db.refresh(user)
    logger.info("Updated profile of user %s", user.id)
    return user


def delete_user(db: Session, user: User):
    """
    Removes the account together with its posts, comments, likes and follow edges.
    """
    user_id = user.id
    db.delete(user)
    db.commit()
    logger.info("Deleted user %s", user_id)
