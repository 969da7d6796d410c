# server/core/engagement.py

import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from core.exceptions import (
    AlreadyLikedError,
    PostNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from models.post import Comment, Post, PostLike
from models.user import User, UserLikedPost


logger = logging.getLogger(__name__)


def _get_post(db: Session, post_id: str) -> Post:
    post = db.get(Post, post_id)
    if not post:
        raise PostNotFoundError()
    return post


# -------------------------------
# Post likes
# -------------------------------

def toggle_like(db: Session, post_id: str, user_id: str) -> tuple[Post, bool]:
    """
    Likes the post if the user has not liked it yet, otherwise removes the like.
    Returns the refreshed post and whether the user likes it afterwards.
    """
    post = _get_post(db, post_id)
    if db.get(User, user_id) is None:
        raise UserNotFoundError()

    row = (
        db.query(PostLike)
        .filter(PostLike.post_id == post_id, PostLike.user_id == user_id)
        .first()
    )
    if row:
        db.delete(row)
        liked = False
    else:
        db.add(PostLike(post_id=post_id, user_id=user_id))
        liked = True

    try:
        db.commit()
    except IntegrityError:
        # another request inserted the same like first
        db.rollback()
        liked = True
    db.refresh(post)

    logger.info("User %s %s post %s", user_id, "liked" if liked else "unliked", post_id)
    return post, liked


# -------------------------------
# User liked-posts record
# -------------------------------

def like_as_user_record(db: Session, post_id: str, user_id: str) -> User:
    """
    Appends the post to the user's own liked-posts list.
    This list is kept apart from Post.likes and is not synchronised with it.
    """
    user = db.get(User, user_id)
    if not user:
        raise UserNotFoundError()
    _get_post(db, post_id)

    if post_id in user.liked_post_ids:
        raise AlreadyLikedError()

    db.add(UserLikedPost(user_id=user_id, post_id=post_id))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise AlreadyLikedError()
    db.refresh(user)

    logger.info("User %s recorded like of post %s", user_id, post_id)
    return user


# -------------------------------
# Comments
# -------------------------------

def add_comment(db: Session, post_id: str, user_id: str, text: str | None) -> Comment:
    if text is None or not text.strip():
        raise ValidationError("Comment text is required.", field="text")
    _get_post(db, post_id)
    if db.get(User, user_id) is None:
        raise UserNotFoundError()

    comment = Comment(post_id=post_id, user_id=user_id, text=text.strip())
    db.add(comment)
    db.commit()
    db.refresh(comment)

    logger.info("User %s commented on post %s", user_id, post_id)
    return comment
