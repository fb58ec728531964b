"""Storage backends for the ledger."""

from bookkeeping.stores.base import AccountStore, EntryStore, Storage
from bookkeeping.stores.memory import InMemoryStorage
from bookkeeping.stores.sql import SqlStorage

__all__ = [
    "AccountStore",
    "EntryStore",
    "Storage",
    "InMemoryStorage",
    "SqlStorage",
]
