import pytest
from fastapi import HTTPException

import rayzum.dependencies as deps
from rayzum.store import LocalEntityStore


class _Creds:
    def __init__(self, token: str):
        self.credentials = token


def test_missing_credentials_uses_default_owner(monkeypatch):
    monkeypatch.setattr(deps.settings, "allow_default_owner", True)
    monkeypatch.setattr(deps.settings, "default_owner_id", "demo-user")
    assert deps.get_current_owner(credentials=None) == "demo-user"


def test_missing_credentials_rejected_when_default_disabled(monkeypatch):
    monkeypatch.setattr(deps.settings, "allow_default_owner", False)
    with pytest.raises(HTTPException) as ex:
        deps.get_current_owner(credentials=None)
    assert ex.value.status_code == 401


def test_invalid_token(monkeypatch):
    monkeypatch.setattr(deps, "decode_access_token", lambda token: None)
    with pytest.raises(HTTPException) as ex:
        deps.get_current_owner(credentials=_Creds("bad"))
    assert ex.value.status_code == 401
    assert ex.value.detail == "Invalid or expired token"


def test_valid_token_returns_subject(monkeypatch):
    monkeypatch.setattr(deps, "decode_access_token", lambda token: "u1")
    assert deps.get_current_owner(credentials=_Creds("tok")) == "u1"


def test_get_store_local_is_shared_per_path(monkeypatch, tmp_path):
    monkeypatch.setattr(deps.settings, "storage_backend", "local")
    monkeypatch.setattr(deps.settings, "local_store_path", str(tmp_path / "db.json"))
    with deps.open_store() as first, deps.open_store() as second:
        assert isinstance(first, LocalEntityStore)
        assert first is second
