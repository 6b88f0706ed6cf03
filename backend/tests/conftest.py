import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOGIN_RATE_LIMIT", "1000")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from staff_api.core.deps import get_role_directory
from staff_api.db.base import Base
from staff_api.db.session import get_db
from staff_api.main import create_app
from staff_api.services.role_directory import RoleInfo
import staff_api.models.staff  # noqa: F401


class FakeRoleDirectory:
    def __init__(self):
        self.roles = {}
        self.calls = []

    def add(self, role_id: str, name: str, limit: int) -> None:
        self.roles[role_id] = RoleInfo(id=role_id, name=name, limit=limit)

    def fetch_role(self, role_id):
        self.calls.append(role_id)
        return self.roles.get(role_id)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    Session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def roles():
    directory = FakeRoleDirectory()
    directory.add("r1", "Manager", 5)
    directory.add("r2", "Cashier", 1)
    return directory


@pytest.fixture
def app(db_session, roles):
    app = create_app()

    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_role_directory] = lambda: roles
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def staff_payload():
    return {
        "username": "a",
        "email": "a@x.com",
        "phone": "01234567890",
        "cnic": "1234567890123",
        "password": "password1",
        "role": "r1",
    }
