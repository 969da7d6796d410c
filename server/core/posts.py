# server/core/posts.py

import logging
from sqlalchemy.orm import Session, selectinload
from core.exceptions import AuthorizationError, PostNotFoundError, UserNotFoundError, ValidationError
from models.post import Comment, Post
from models.user import User


logger = logging.getLogger(__name__)


def get_owned_post(db: Session, post_id: str, actor_id: str) -> Post:
    post = db.get(Post, post_id)
    if not post:
        raise PostNotFoundError()
    if post.owner_id != actor_id:
        raise AuthorizationError("You can only modify your own posts.")
    return post


def create_post(db: Session, owner_id: str, title: str | None, image_ref: str | None) -> Post:
    title = (title or "").strip()
    if not title or not image_ref:
        raise ValidationError("Title and image are required.")
    if db.get(User, owner_id) is None:
        raise UserNotFoundError()

    post = Post(title=title, post_image=image_ref, owner_id=owner_id)
    db.add(post)
    db.commit()
    db.refresh(post)

    logger.info("User %s created post %s", owner_id, post.id)
    return post


def update_post(db: Session, post_id: str, actor_id: str, title: str | None = None, image_ref: str | None = None) -> Post:
    """
    Changes the title and/or image of the actor's own post.
    """
    post = get_owned_post(db, post_id, actor_id)
    if title is not None:
        title = title.strip()
        if not title:
            raise ValidationError("Title cannot be empty.", field="title")
        post.title = title
    if image_ref is not None:
        post.post_image = image_ref

    db.commit()
    db.refresh(post)
    logger.info("User %s updated post %s", actor_id, post_id)
    return post


def delete_post(db: Session, post_id: str, actor_id: str):
    post = get_owned_post(db, post_id, actor_id)
    db.delete(post)
    db.commit()
    logger.info("User %s deleted post %s", actor_id, post_id)


def list_posts(db: Session) -> list[Post]:
    """
    All posts, newest first, with owners, likes and comment authors loaded.
    """
    return (
        db.query(Post)
        .options(
            selectinload(Post.owner),
            selectinload(Post.like_rows),
            selectinload(Post.comments).selectinload(Comment.user),
        )
        .order_by(Post.created_at.desc())
        .all()
    )
