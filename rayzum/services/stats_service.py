"""Per-collection record counts for one owner."""

from rayzum.store.base import Collection, EntityStore


def get_stats(store: EntityStore, owner_id: str) -> dict:
    return {collection.value: store.count(owner_id, collection) for collection in Collection}
