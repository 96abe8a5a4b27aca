import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import rayzum.models  # noqa: F401
from rayzum.database import Base
from rayzum.dependencies import get_current_owner, get_store
from rayzum.main import app
from rayzum.store import LocalEntityStore, SqlEntityStore


@pytest.fixture
def owner() -> str:
    return "owner-1"


@pytest.fixture
def local_store(tmp_path) -> LocalEntityStore:
    return LocalEntityStore(tmp_path / "rayzum.json")


@pytest.fixture
def sql_store():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    db = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield SqlEntityStore(db)
    db.close()
    engine.dispose()


@pytest.fixture(params=["local", "sql"])
def store(request):
    """Runs the test once per storage backend."""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def client(local_store, owner):
    def _store_override():
        yield local_store

    app.dependency_overrides[get_store] = _store_override
    app.dependency_overrides[get_current_owner] = lambda: owner
    yield TestClient(app)
    app.dependency_overrides.clear()
