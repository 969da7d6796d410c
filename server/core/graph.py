# server/core/graph.py

import logging
from sqlalchemy.orm import Session
from core.exceptions import UserNotFoundError, ValidationError
from models.user import Follow, User


logger = logging.getLogger(__name__)


def toggle_follow(db: Session, actor_id: str, target_id: str) -> bool:
    """
    Follows ``target_id`` if the actor does not follow them yet, otherwise unfollows.
    Returns True when the actor follows the target afterwards.

    A single follow row backs both the actor's following list and the
    target's follower list, so one commit flips both sides together.
    """
    if actor_id == target_id:
        raise ValidationError("You cannot follow yourself.")
    if db.get(User, actor_id) is None or db.get(User, target_id) is None:
        raise UserNotFoundError()

    edge = (
        db.query(Follow)
        .filter(Follow.follower_id == actor_id, Follow.followee_id == target_id)
        .first()
    )
    if edge:
        db.delete(edge)
        following = False
    else:
        db.add(Follow(follower_id=actor_id, followee_id=target_id))
        following = True
    db.commit()

    logger.info("User %s %s user %s", actor_id, "followed" if following else "unfollowed", target_id)
    return following
