import os

# Must be set before app.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_media_uploader
from app.core.errors import UploadError
from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.models import User
from app.services import UploadResult

PHOTO = ("photo.png", b"\x89PNG\r\n\x1a\nfake-image-bytes", "image/png")


class FakeUploader:
    """Records uploads and hands back predictable URLs."""

    def __init__(self):
        self.calls = []
        self.error = None
        self.on_upload = None

    def upload(self, file, *, resource_type="image"):
        if self.error is not None:
            raise self.error
        if self.on_upload is not None:
            self.on_upload()
        self.calls.append((file, resource_type))
        n = len(self.calls)
        return UploadResult(
            url=f"https://media.test/{resource_type}/{n}/{file.filename}",
            public_id=f"upload-{n}",
        )

    def fail_with(self, error=None):
        self.error = error or UploadError("Failed to upload file to Cloudinary")


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def uploader():
    return FakeUploader()


@pytest.fixture
def client(session_factory, uploader):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_media_uploader] = lambda: uploader
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def register_user(client):
    """POST a registration form; keyword overrides replace fields, None drops them."""

    def _register(file=PHOTO, **overrides):
        form = {
            "fullname": "Ana",
            "email": "a@x.com",
            "phoneNumber": "1234567890",
            "password": "secret1",
            "role": "seeker",
        }
        form.update(overrides)
        form = {k: v for k, v in form.items() if v is not None}
        files = {"file": file} if file is not None else None
        return client.post("/api/v1/users/register", data=form, files=files)

    return _register


@pytest.fixture
def login_user(client):
    def _login(email="a@x.com", password="secret1", role="seeker"):
        return client.post(
            "/api/v1/users/login",
            json={"email": email, "password": password, "role": role},
        )

    return _login


@pytest.fixture
def users_with_email(db):
    def _count(email):
        db.expire_all()
        return db.query(User).filter(User.email == email).count()

    return _count
