import logging
from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from rayzum.config import settings
from rayzum.core.security import decode_access_token
from rayzum.database import get_db
from rayzum.store import EntityStore, LocalEntityStore, SqlEntityStore

logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=False)

STORAGE_BACKENDS = {"sql", "local"}


@lru_cache
def get_local_store(path: str) -> LocalEntityStore:
    """One store per file so every request shares the same write lock."""
    return LocalEntityStore(path)


@contextmanager
def open_store() -> Iterator[EntityStore]:
    """Store for the configured backend; the sql session is closed on exit."""
    backend = (settings.storage_backend or "sql").lower()
    if backend == "local":
        yield get_local_store(settings.local_store_path)
        return
    with contextmanager(get_db)() as db:
        yield SqlEntityStore(db)


def get_store() -> Iterator[EntityStore]:
    with open_store() as store:
        yield store


def get_current_owner(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str:
    """Owner id from the bearer token, or the configured default owner when no token is sent."""
    if not credentials:
        if settings.allow_default_owner:
            return settings.default_owner_id
        logger.info("Auth failed: missing bearer credentials")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    owner_id = decode_access_token(credentials.credentials)
    if not owner_id:
        logger.info("Auth failed: invalid or expired token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    return owner_id
