import json
import logging
import os
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from rayzum.core.errors import ConflictError
from rayzum.store.base import Collection, EntityStore, Record, matches

logger = logging.getLogger(__name__)

STORAGE_KEY = "rayzum_db"

# Same unique keys as the sql models' UniqueConstraints, checked under the lock.
UNIQUE_FIELDS: dict[Collection, tuple[str, ...]] = {
    Collection.NAMES: ("value",),
    Collection.PHONES: ("value",),
    Collection.EMAILS: ("value",),
    Collection.EDUCATION_ITEMS: ("school", "degree", "year"),
    Collection.RESUMES: ("title",),
    Collection.RESUME_EXPERIENCE_INSTANCES: ("resume_id", "experience_template_id"),
    Collection.RESUME_EDUCATION: ("resume_id", "education_item_id"),
    Collection.DEFAULTS: ("entity_type",),
}


def _empty_dataset() -> dict[str, list[Record]]:
    return {c.value: [] for c in Collection}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _check_unique(
    collection: Collection, items: list[Record], fields: dict[str, Any], record_id: int | None = None
) -> None:
    keys = UNIQUE_FIELDS.get(collection)
    if not keys:
        return
    for item in items:
        if item["id"] != record_id and all(item.get(k) == fields.get(k) for k in keys):
            logger.info("Unique key %s violated in %s", keys, collection.value)
            raise ConflictError(f"A matching {collection.value} record already exists")


class LocalEntityStore(EntityStore):
    """
    Key-value document store kept in a single JSON file.
    Each owner's whole dataset lives under ``rayzum_db:<owner_id>``; every
    operation loads it, mutates it and writes it back while holding the lock.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = threading.RLock()

    def _key(self, owner_id: str) -> str:
        return f"{STORAGE_KEY}:{owner_id}"

    def _read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        raw = self.path.read_text(encoding="utf-8")
        return json.loads(raw) if raw.strip() else {}

    def _write_all(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
        os.replace(tmp, self.path)

    def _load(self, owner_id: str) -> dict[str, list[Record]]:
        dataset = _empty_dataset()
        dataset.update(self._read_all().get(self._key(owner_id), {}))
        return dataset

    def _save(self, owner_id: str, dataset: dict[str, list[Record]]) -> None:
        data = self._read_all()
        data[self._key(owner_id)] = dataset
        self._write_all(data)

    def select(self, owner_id: str, collection: Collection, **where: Any) -> list[Record]:
        with self._lock:
            items = self._load(owner_id)[collection.value]
        return [dict(item) for item in items if matches(item, where)]

    def insert(self, owner_id: str, collection: Collection, fields: dict[str, Any]) -> Record:
        with self._lock:
            dataset = self._load(owner_id)
            items = dataset[collection.value]
            _check_unique(collection, items, fields)
            next_id = max((item["id"] for item in items), default=0) + 1
            record = {"id": next_id, **fields, "created_at": _now()}
            items.append(record)
            self._save(owner_id, dataset)
        return dict(record)

    def update(self, owner_id: str, collection: Collection, record_id: int, fields: dict[str, Any]) -> Record | None:
        with self._lock:
            dataset = self._load(owner_id)
            items = dataset[collection.value]
            for index, item in enumerate(items):
                if item["id"] == record_id:
                    updated = {**item, **fields, "updated_at": _now()}
                    _check_unique(collection, items, updated, record_id)
                    items[index] = updated
                    self._save(owner_id, dataset)
                    return dict(updated)
        return None

    def delete(self, owner_id: str, collection: Collection, record_id: int) -> bool:
        return self.delete_where(owner_id, collection, id=record_id) > 0

    def delete_where(self, owner_id: str, collection: Collection, **where: Any) -> int:
        with self._lock:
            dataset = self._load(owner_id)
            items = dataset[collection.value]
            kept = [item for item in items if not matches(item, where)]
            removed = len(items) - len(kept)
            if removed:
                dataset[collection.value] = kept
                self._save(owner_id, dataset)
        return removed

    def clear_all(self, owner_id: str) -> None:
        with self._lock:
            self._save(owner_id, _empty_dataset())
        logger.info("Cleared all data for owner %s", owner_id)

    def ping(self) -> None:
        with self._lock:
            self._read_all()
