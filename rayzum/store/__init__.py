from rayzum.store.base import Collection, EntityStore, Record
from rayzum.store.local_store import LocalEntityStore
from rayzum.store.sql_store import SqlEntityStore

__all__ = [
    "Collection",
    "EntityStore",
    "Record",
    "LocalEntityStore",
    "SqlEntityStore",
]
