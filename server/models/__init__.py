# server/models/__init__.py

from datetime import datetime, timezone
from sqlalchemy.orm import declarative_base


Base = declarative_base()


def utcnow():
    return datetime.now(timezone.utc)


from models.user import User, Follow, UserLikedPost  # noqa: E402
from models.post import Post, PostLike, Comment  # noqa: E402

__all__ = ["Base", "User", "Follow", "UserLikedPost", "Post", "PostLike", "Comment", "utcnow"]
