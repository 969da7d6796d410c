import pytest

from core import engagement
from core.exceptions import (
    AlreadyLikedError,
    PostNotFoundError,
    UserNotFoundError,
    ValidationError,
)


class TestToggleLike:
    def test_like_then_unlike(self, db, make_user, make_post):
        ann = make_user()
        post = make_post(ann)

        post, liked = engagement.toggle_like(db, post.id, ann.id)
        assert liked is True
        assert post.like_ids == [ann.id]

        post, liked = engagement.toggle_like(db, post.id, ann.id)
        assert liked is False
        assert post.like_ids == []

    def test_toggle_twice_restores_membership(self, db, make_user, make_post):
        """Two toggles leave likes with the same members and size"""
        ann = make_user()
        bob = make_user(first_name="Bob")
        post = make_post(ann)
        engagement.toggle_like(db, post.id, bob.id)
        before = list(post.like_ids)

        engagement.toggle_like(db, post.id, ann.id)
        post, _ = engagement.toggle_like(db, post.id, ann.id)

        assert post.like_ids == before
        assert len(post.like_ids) == 1

    def test_each_toggle_flips_once(self, db, make_user, make_post):
        ann = make_user()
        post = make_post(ann)
        states = [engagement.toggle_like(db, post.id, ann.id)[1] for _ in range(5)]
        assert states == [True, False, True, False, True]
        assert post.like_ids.count(ann.id) == 1

    def test_missing_post(self, db, make_user):
        ann = make_user()
        with pytest.raises(PostNotFoundError):
            engagement.toggle_like(db, "missing", ann.id)

    def test_unknown_user_leaves_likes_untouched(self, db, make_user, make_post):
        """A user id with no account behind it cannot like"""
        post = make_post(make_user())
        with pytest.raises(UserNotFoundError):
            engagement.toggle_like(db, post.id, "deleted-user")

        db.expire_all()
        assert post.like_ids == []


class TestLikeAsUserRecord:
    def test_appends_to_user_list(self, db, make_user, make_post):
        ann = make_user()
        post = make_post(ann)
        user = engagement.like_as_user_record(db, post.id, ann.id)
        assert user.liked_post_ids == [post.id]

    def test_duplicate_fails_instead_of_toggling(self, db, make_user, make_post):
        ann = make_user()
        post = make_post(ann)
        engagement.like_as_user_record(db, post.id, ann.id)
        with pytest.raises(AlreadyLikedError):
            engagement.like_as_user_record(db, post.id, ann.id)

        db.expire_all()
        assert ann.liked_post_ids == [post.id]

    def test_independent_of_post_likes(self, db, make_user, make_post):
        """The user's liked-posts list and Post.likes are tracked separately"""
        ann = make_user()
        post = make_post(ann)
        engagement.like_as_user_record(db, post.id, ann.id)
        db.expire_all()
        assert post.like_ids == []

    def test_unknown_user(self, db, make_user, make_post):
        post = make_post(make_user())
        with pytest.raises(UserNotFoundError):
            engagement.like_as_user_record(db, post.id, "missing")


class TestAddComment:
    def test_appends_comment(self, db, make_user, make_post):
        ann = make_user()
        bob = make_user(first_name="Bob")
        post = make_post(ann)

        first = engagement.add_comment(db, post.id, bob.id, "Nice shot")
        second = engagement.add_comment(db, post.id, ann.id, "Thanks!")

        db.expire_all()
        assert [c.id for c in post.comments] == [first.id, second.id]
        assert first.user_id == bob.id
        assert first.text == "Nice shot"
        assert first.created_at is not None

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_empty_text_rejected(self, db, make_user, make_post, text):
        """Empty comment fails and the post keeps its comment count"""
        ann = make_user()
        post = make_post(ann)
        engagement.add_comment(db, post.id, ann.id, "first")

        with pytest.raises(ValidationError):
            engagement.add_comment(db, post.id, ann.id, text)

        db.expire_all()
        assert len(post.comments) == 1

    def test_missing_post(self, db, make_user):
        ann = make_user()
        with pytest.raises(PostNotFoundError):
            engagement.add_comment(db, "missing", ann.id, "hello")

    def test_unknown_user_cannot_comment(self, db, make_user, make_post):
        post = make_post(make_user())
        with pytest.raises(UserNotFoundError):
            engagement.add_comment(db, post.id, "deleted-user", "hello")

        db.expire_all()
        assert post.comments == []
