import pytest
from fastapi.testclient import TestClient

from mittirang.config import Settings
from mittirang.db import Database
from mittirang.main import create_app

ADMIN_EMAIL = "admin@mittirang.com"
ADMIN_PASSWORD = "admin123"


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file and media directory."""
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        MEDIA_DIR=str(tmp_path / "media"),
        SECRET_KEY="test-secret",
        BCRYPT_ROUNDS=4,
        ADMIN_EMAIL=ADMIN_EMAIL,
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        MAX_UPLOAD_BYTES=1024,
    )


@pytest.fixture
def client(settings):
    # the context manager runs the lifespan (schema + default admin)
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def admin_headers(client):
    res = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert res.status_code == 200
    # drop the cookie so tests exercise the bearer header explicitly
    client.cookies.clear()
    return {"Authorization": f"Bearer {res.json()['access_token']}"}


@pytest.fixture
def database(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'service.db'}")
    db.init()
    yield db
    db.close()


@pytest.fixture
def session(database):
    s = database.session()
    try:
        yield s
    finally:
        s.close()
