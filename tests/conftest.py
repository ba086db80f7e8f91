import os

# La configuration est lue à l'import de app.core.config : à définir avant tout import de l'app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["ENV"] = "test"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.pop("ACCESS_TTL_MINUTES", None)

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session

from app.main import app
from app.db.session import build_engine, get_session

PASSWORD = "Abc123!"


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Inscrit puis connecte un utilisateur ; retourne les headers d'authentification."""
    def _register(email: str, password: str = PASSWORD, name: str = "Alice"):
        res = client.post("/signup", json={"email": email, "name": name, "password": password})
        assert res.status_code == 201, res.text
        res = client.post("/signin", json={"email": email, "password": password})
        assert res.status_code == 200, res.text
        return {"token": res.json()["token"]}
    return _register


@pytest.fixture
def in_days():
    def _in_days(days: float) -> str:
        return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()
    return _in_days
