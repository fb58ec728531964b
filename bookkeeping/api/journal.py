"""
Journal entry API endpoints.

Entries are committed through the LedgerService, which rejects
unbalanced or malformed entries with a 400 and unknown accounts
with a 404. Nothing is written when a request is rejected.
"""

from fastapi import APIRouter, Depends, HTTPException

from bookkeeping.api.dependencies import get_storage
from bookkeeping.exceptions import NotFoundError, ValidationError
from bookkeeping.services.ledger_service import LedgerService
from bookkeeping.services.quick_entry_service import QuickEntryService
from bookkeeping.schemas.journal import (
    JournalEntryCreate,
    JournalEntryResponse,
    QuickEntryCreate,
)
from bookkeeping.stores.base import Storage

router = APIRouter(
    prefix="/organizations/{organization_id}",
    tags=["Journal"],
)


@router.get("/journal-entries", response_model=list[JournalEntryResponse])
def list_journal_entries(
    organization_id: int,
    storage: Storage = Depends(get_storage),
):
    """List the organization's committed entries, oldest first."""
    service = LedgerService(storage)
    return service.list_journal_entries(organization_id)


@router.post(
    "/journal-entries",
    response_model=JournalEntryResponse,
    status_code=201,
)
def commit_journal_entry(
    organization_id: int,
    request: JournalEntryCreate,
    storage: Storage = Depends(get_storage),
):
    """
    Commit a balanced journal entry.

    The lines must contain at least one debit and one credit,
    and total debits must equal total credits.
    """
    service = LedgerService(storage)
    try:
        return service.commit_entry(organization_id, request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get(
    "/journal-entries/{entry_id}",
    response_model=JournalEntryResponse,
)
def get_journal_entry(
    organization_id: int,
    entry_id: int,
    storage: Storage = Depends(get_storage),
):
    service = LedgerService(storage)
    try:
        entry = service.get_journal_entry(entry_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    if entry.organization_id != organization_id:
        raise HTTPException(
            status_code=404, detail=f"Journal entry {entry_id} not found"
        )
    return entry


@router.post(
    "/quick-entries/sales",
    response_model=JournalEntryResponse,
    status_code=201,
)
def record_sale(
    organization_id: int,
    request: QuickEntryCreate,
    storage: Storage = Depends(get_storage),
):
    """Record a cash sale: debit cash, credit sales revenue."""
    service = QuickEntryService(storage)
    try:
        return service.record_sale(organization_id, request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "/quick-entries/expenses",
    response_model=JournalEntryResponse,
    status_code=201,
)
def record_expense(
    organization_id: int,
    request: QuickEntryCreate,
    storage: Storage = Depends(get_storage),
):
    """Record a cash expense: debit the expense, credit cash."""
    service = QuickEntryService(storage)
    try:
        return service.record_expense(organization_id, request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
