import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import rayzum.database as dbmod
import rayzum.dependencies as deps
from rayzum.store import Collection, SqlEntityStore

TABLES = [
    "defaults",
    "education_items",
    "emails",
    "experience_templates",
    "highlights",
    "names",
    "phones",
    "resume_education",
    "resume_experience_instances",
    "resumes",
]


class _Session:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


@pytest.fixture
def memory_engine(monkeypatch):
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    monkeypatch.setattr(dbmod, "engine", engine)
    yield engine
    engine.dispose()


def test_engine_kwargs_by_dialect():
    assert dbmod._engine_kwargs("sqlite:///./rayzum.db") == {"connect_args": {"check_same_thread": False}}
    assert dbmod._engine_kwargs("postgresql://u:p@h/rayzum") == {"pool_pre_ping": True}


def test_ensure_tables_exist_creates_every_collection_table_once(memory_engine):
    assert dbmod.ensure_tables_exist() == TABLES
    assert dbmod.ensure_tables_exist() == []


def test_init_db_makes_store_usable(memory_engine, monkeypatch):
    dbmod.init_db()
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=memory_engine)
    monkeypatch.setattr(dbmod, "SessionLocal", session_factory)
    monkeypatch.setattr(deps.settings, "storage_backend", "sql")

    with deps.open_store() as store:
        store.insert("owner-1", Collection.NAMES, {"value": "Ada"})
    with deps.open_store() as store:
        assert [n["value"] for n in store.select("owner-1", Collection.NAMES)] == ["Ada"]


def test_init_db_propagates_failure(monkeypatch):
    class _MetaFail:
        def create_all(self, bind):
            raise RuntimeError("db fail")

    monkeypatch.setattr(dbmod.Base, "metadata", _MetaFail())
    with pytest.raises(RuntimeError):
        dbmod.init_db()


def test_open_store_sql_closes_session_from_get_db(monkeypatch):
    session = _Session()
    monkeypatch.setattr(deps.settings, "storage_backend", "sql")
    monkeypatch.setattr(dbmod, "SessionLocal", lambda: session)

    with deps.open_store() as store:
        assert isinstance(store, SqlEntityStore)
        assert store.db is session
        assert session.closed is False
    assert session.closed is True


def test_open_store_sql_closes_session_on_error(monkeypatch):
    session = _Session()
    monkeypatch.setattr(deps.settings, "storage_backend", "sql")
    monkeypatch.setattr(dbmod, "SessionLocal", lambda: session)

    with pytest.raises(RuntimeError):
        with deps.open_store():
            raise RuntimeError("request failed")
    assert session.closed is True


def test_ensure_tables_exist_failure(monkeypatch):
    def _boom(_engine):
        raise RuntimeError("inspect failed")

    monkeypatch.setattr(dbmod, "inspect", _boom)
    with pytest.raises(RuntimeError):
        dbmod.ensure_tables_exist()
