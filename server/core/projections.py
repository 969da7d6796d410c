# server/core/projections.py

"""
Public views of users, posts and comments.

None of these types declares a password field, so nothing built from them
can carry the stored hash to a client.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from models.post import Comment, Post
from models.user import User


class PublicModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserSummary(PublicModel):
    id: str
    first_name: str
    last_name: str
    email: str


class UserPublic(UserSummary):
    profile_image: Optional[str] = None
    cover_image: Optional[str] = None
    bio: Optional[str] = None
    work_at: Optional[str] = None
    address: Optional[str] = None
    relationship_status: Optional[str] = None
    your_post: list[str] = []
    your_like_post: list[str] = []
    following: list[str] = []
    follower: list[str] = []
    created_at: datetime
    updated_at: datetime


class CommentPublic(PublicModel):
    id: int
    user: Optional[UserSummary] = None
    text: str
    created_at: datetime


class PostPublic(PublicModel):
    id: str
    title: str
    post_image: str
    likes: list[str] = []
    comments: list[CommentPublic] = []
    create_post_by: Optional[UserSummary] = None
    created_at: datetime
    updated_at: datetime


# -------------------------------
# Builders
# -------------------------------

def user_summary(user: User | None) -> UserSummary | None:
    if user is None:
        return None
    return UserSummary(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
    )


def user_public(user: User) -> UserPublic:
    return UserPublic(
        id=user.id,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        profile_image=user.profile_image,
        cover_image=user.cover_image,
        bio=user.bio,
        work_at=user.work_at,
        address=user.address,
        relationship_status=user.relationship_status,
        your_post=user.post_ids,
        your_like_post=user.liked_post_ids,
        following=user.following_ids,
        follower=user.follower_ids,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def comment_public(comment: Comment) -> CommentPublic:
    return CommentPublic(
        id=comment.id,
        user=user_summary(comment.user),
        text=comment.text,
        created_at=comment.created_at,
    )


def post_public(post: Post) -> PostPublic:
    return PostPublic(
        id=post.id,
        title=post.title,
        post_image=post.post_image,
        likes=post.like_ids,
        comments=[comment_public(comment) for comment in post.comments],
        create_post_by=user_summary(post.owner),
        created_at=post.created_at,
        updated_at=post.updated_at,
    )
