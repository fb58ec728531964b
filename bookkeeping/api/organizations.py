"""
Organization API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException

from bookkeeping.api.dependencies import get_storage
from bookkeeping.exceptions import NotFoundError, ValidationError
from bookkeeping.services.organization_service import OrganizationService
from bookkeeping.schemas.organization import (
    OrganizationCreate,
    OrganizationResponse,
)
from bookkeeping.stores.base import Storage

router = APIRouter(prefix="/organizations", tags=["Organizations"])


@router.post("", response_model=OrganizationResponse, status_code=201)
def create_organization(
    request: OrganizationCreate,
    storage: Storage = Depends(get_storage),
):
    """
    Create a new organization.

    With seed_default_chart=true the organization starts with
    the default chart of accounts (cash, bank, sales, ...).
    """
    service = OrganizationService(storage)
    try:
        return service.create_organization(request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{organization_id}", response_model=OrganizationResponse)
def get_organization(
    organization_id: int,
    storage: Storage = Depends(get_storage),
):
    service = OrganizationService(storage)
    try:
        return service.get_organization(organization_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
