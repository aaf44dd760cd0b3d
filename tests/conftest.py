import os
import tempfile

import pytest

_DB_DIR = tempfile.mkdtemp(prefix="agroconnect-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from fastapi.testclient import TestClient  # noqa: E402

from agroconnect.db.init import drop_db, init_db  # noqa: E402
from agroconnect.main import app  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_schema():
    drop_db()
    init_db()
    yield


@pytest.fixture
def client():
    return TestClient(app)


def register(client, email: str, role: str = "buyer", name: str = "Test User", password: str = "secret123"):
    r = client.post(
        "/auth/register",
        json={"email": email, "password": password, "fullName": name, "role": role},
    )
    assert r.status_code == 201, r.text
    body = r.json()
    return {"Authorization": f"Bearer {body['token']}"}, body["user"]


@pytest.fixture
def farmer(client):
    return register(client, "farmer.one@agroconnect.io", role="farmer", name="Farmer One")


@pytest.fixture
def buyer(client):
    return register(client, "buyer.one@agroconnect.io", role="buyer", name="Buyer One")
