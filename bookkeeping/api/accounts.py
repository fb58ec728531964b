"""
Chart of accounts API endpoints.

The API layer is thin — it handles HTTP concerns (status codes,
response formatting) and delegates all business logic to the
AccountService.
"""

from fastapi import APIRouter, Depends, HTTPException

from bookkeeping.api.dependencies import get_storage
from bookkeeping.exceptions import NotFoundError, ValidationError
from bookkeeping.models.enums import AccountClass
from bookkeeping.services.account_service import AccountService
from bookkeeping.schemas.account import AccountCreate, AccountResponse
from bookkeeping.stores.base import Storage

router = APIRouter(
    prefix="/organizations/{organization_id}/accounts",
    tags=["Accounts"],
)


def _get_owned_account(service: AccountService, organization_id: int, account_id: int):
    """Load an account, treating another organization's account as missing."""
    account = service.get_account(account_id)
    if account.organization_id != organization_id:
        raise NotFoundError("Account", account_id)
    return account


@router.get("", response_model=list[AccountResponse])
def list_accounts(
    organization_id: int,
    account_class: AccountClass | None = None,
    include_inactive: bool = True,
    storage: Storage = Depends(get_storage),
):
    """List the organization's accounts in the order they were added."""
    service = AccountService(storage)
    return service.list_accounts(
        organization_id,
        account_class=account_class,
        include_inactive=include_inactive,
    )


@router.post("", response_model=AccountResponse, status_code=201)
def create_account(
    organization_id: int,
    request: AccountCreate,
    storage: Storage = Depends(get_storage),
):
    """
    Add an account to the chart of accounts.

    Every account must be created before entries can be posted to it.
    """
    service = AccountService(storage)
    try:
        return service.create_account(organization_id, request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    organization_id: int,
    account_id: int,
    storage: Storage = Depends(get_storage),
):
    service = AccountService(storage)
    try:
        return _get_owned_account(service, organization_id, account_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{account_id}/deactivate", response_model=AccountResponse)
def deactivate_account(
    organization_id: int,
    account_id: int,
    storage: Storage = Depends(get_storage),
):
    """
    Deactivate an account.

    The account keeps its balance but accepts no new entries.
    """
    service = AccountService(storage)
    try:
        _get_owned_account(service, organization_id, account_id)
        return service.deactivate_account(account_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
