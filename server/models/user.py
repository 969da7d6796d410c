# server/models/user.py

import uuid
from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from . import Base, utcnow


def new_id() -> str:
    return str(uuid.uuid4())


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for application users.
    Stores profile fields and the bcrypt hash used for authentication.
    Follow edges and liked-post records live in their own tables and are
    exposed here as ordered id lists.
    """
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    first_name = Column(String(15), nullable=False)
    last_name = Column(String(15), nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    profile_image = Column(String, nullable=True)
    cover_image = Column(String, nullable=True)
    bio = Column(String(100), nullable=True)
    work_at = Column(String, nullable=True)
    address = Column(String, nullable=True)
    relationship_status = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    posts = relationship(
        "Post",
        back_populates="owner",
        order_by="Post.created_at",
        cascade="all, delete-orphan",
    )
    following_edges = relationship(
        "Follow",
        foreign_keys="Follow.follower_id",
        back_populates="follower",
        order_by="Follow.id",
        cascade="all, delete-orphan",
    )
    follower_edges = relationship(
        "Follow",
        foreign_keys="Follow.followee_id",
        back_populates="followee",
        order_by="Follow.id",
        cascade="all, delete-orphan",
    )
    liked_post_records = relationship(
        "UserLikedPost",
        back_populates="user",
        order_by="UserLikedPost.id",
        cascade="all, delete-orphan",
    )
    post_likes = relationship("PostLike", back_populates="user", cascade="all, delete-orphan")
    comments = relationship("Comment", back_populates="user", cascade="all, delete-orphan")

    @property
    def post_ids(self) -> list[str]:
        return [post.id for post in self.posts]

    @property
    def following_ids(self) -> list[str]:
        return [edge.followee_id for edge in self.following_edges]

    @property
    def follower_ids(self) -> list[str]:
        return [edge.follower_id for edge in self.follower_edges]

    @property
    def liked_post_ids(self) -> list[str]:
        return [record.post_id for record in self.liked_post_records]


# -------------------------------
# Follow Edge
# -------------------------------

class Follow(Base):
    """
    One row per "follower follows followee".
    Both User.following and User.followers are read from this table.
    """
    __tablename__ = "follows"
    __table_args__ = (
        UniqueConstraint("follower_id", "followee_id", name="uq_follow_edge"),
        CheckConstraint("follower_id <> followee_id", name="ck_no_self_follow"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    follower_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    followee_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    follower = relationship("User", foreign_keys=[follower_id], back_populates="following_edges")
    followee = relationship("User", foreign_keys=[followee_id], back_populates="follower_edges")


class UserLikedPost(Base):
    __tablename__ = "user_liked_posts"
    __table_args__ = (
        UniqueConstraint("user_id", "post_id", name="uq_user_liked_post"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    post_id = Column(String(36), ForeignKey("posts.id", ondelete="CASCADE"), index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    user = relationship("User", back_populates="liked_post_records")
    post = relationship("Post", back_populates="liked_by_records")
