import io

import pytest
from fastapi.testclient import TestClient

from config import Settings
from core import accounts, posts
from main import create_app


PASSWORD = "secret12"


@pytest.fixture
def settings(tmp_path):
    """In-memory database and a throwaway media directory"""
    return Settings(
        jwt_secret="test-secret",
        database_url="sqlite://",
        media_root=str(tmp_path / "media"),
        media_url="/media",
        allowed_origin="http://testserver",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db):
    """Registers users directly through the accounts service"""
    counter = {"n": 0}

    def _make_user(first_name="Ann", last_name="Lee", email=None, password=PASSWORD):
        counter["n"] += 1
        email = email or f"user{counter['n']}@example.com"
        return accounts.register(db, first_name, last_name, email, password)

    return _make_user


@pytest.fixture
def make_post(db):
    def _make_post(owner, title="Hello there", image_ref="/media/posts/a.png"):
        return posts.create_post(db, owner.id, title, image_ref)

    return _make_post


@pytest.fixture
def image_file():
    def _image_file(name="photo.png", content=b"\x89PNG\r\n\x1a\nfake"):
        return (name, io.BytesIO(content), "image/png")

    return _image_file

