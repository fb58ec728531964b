"""
Health check endpoint.

Used by load balancers, monitoring systems, and humans
to verify the application is running and responsive.
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text

from bookkeeping.api.dependencies import get_storage
from bookkeeping.stores.base import Storage
from bookkeeping.stores.sql import SqlStorage

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(storage: Storage = Depends(get_storage)):
    """
    Return application health status including storage connectivity.

    With the SQL backend the check executes a simple query to
    verify the connection is alive. The in-memory backend is
    always reachable.
    """
    if isinstance(storage, SqlStorage):
        try:
            storage.db.execute(text("SELECT 1"))
            db_status = "healthy"
        except Exception:
            db_status = "unhealthy"
    else:
        db_status = "healthy"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "service": "bookkeeping-ledger",
        "database": db_status,
    }
