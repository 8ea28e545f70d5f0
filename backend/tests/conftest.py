import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from portfolio.config import settings
from portfolio.database import Base
from portfolio.dependencies import get_content_store, get_media_client
from portfolio.main import app
from portfolio.services.content_store import ContentStore
from portfolio.services.media_service import MediaError

TEST_DB_URL = "sqlite:///./test_portfolio.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_content_store():
    return ContentStore(TestingSession, document_key="content")


app.dependency_overrides[get_content_store] = override_get_content_store


class FakeMediaClient:
    """업로드/삭제 호출을 기록하는 테스트용 미디어 클라이언트."""

    def __init__(self, fail_delete: bool = False):
        self.uploads = []
        self.deleted = []
        self.fail_delete = fail_delete

    def upload(self, data, folder, filename="upload"):
        self.uploads.append({"folder": folder, "filename": filename, "size": len(data)})
        public_id = f"portfolio/{folder}/asset{len(self.uploads)}"
        return {
            "url": f"https://res.cloudinary.com/demo/image/upload/v1/{public_id}.png",
            "public_id": public_id,
        }

    def delete(self, public_id):
        if self.fail_delete:
            raise MediaError("delete failed")
        self.deleted.append(public_id)

    def delete_url(self, url):
        if self.fail_delete:
            raise MediaError("delete failed")
        self.deleted.append(url)


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def store():
    return ContentStore(TestingSession, document_key="content")


@pytest.fixture
def media():
    fake = FakeMediaClient()
    app.dependency_overrides[get_media_client] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_media_client, None)


@pytest.fixture
def client():
    return TestClient(app)


def get_token(client, email: str | None = None, password: str | None = None) -> str:
    resp = client.post(
        "/api/auth/login",
        json={
            "email": email or settings.ADMIN_EMAIL,
            "password": password or settings.ADMIN_PASSWORD,
        },
    )
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


def auth_headers(client) -> dict:
    return {"Authorization": f"Bearer {get_token(client)}"}
