"""
Shared FastAPI dependencies.

Endpoints ask for a Storage and never care which backend
sits behind it. STORAGE_BACKEND selects it:
- "sql": a SqlStorage on the request's database session
- "memory": one process-wide InMemoryStorage
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from bookkeeping.config import get_settings
from bookkeeping.models.base import get_db
from bookkeeping.stores.base import Storage
from bookkeeping.stores.memory import InMemoryStorage
from bookkeeping.stores.sql import SqlStorage


@lru_cache()
def get_memory_storage() -> InMemoryStorage:
    """Return the process-wide in-memory ledger."""
    return InMemoryStorage()


def get_storage(db: Session = Depends(get_db)) -> Storage:
    if get_settings().STORAGE_BACKEND == "memory":
        return get_memory_storage()
    return SqlStorage(db)
