"""
Report API endpoints.

Reports are read-only and recomputed on every request.
"""

from fastapi import APIRouter, Depends, HTTPException

from bookkeeping.api.dependencies import get_storage
from bookkeeping.exceptions import NotFoundError
from bookkeeping.models.enums import TrialBalanceMode
from bookkeeping.services.report_service import ReportService
from bookkeeping.schemas.reports import (
    DashboardSummary,
    IncomeStatement,
    TrialBalance,
)
from bookkeeping.stores.base import Storage

router = APIRouter(
    prefix="/organizations/{organization_id}/reports",
    tags=["Reports"],
)


@router.get("/trial-balance", response_model=TrialBalance)
def trial_balance(
    organization_id: int,
    mode: TrialBalanceMode = TrialBalanceMode.SIGNED,
    storage: Storage = Depends(get_storage),
):
    """
    Trial balance of every account.

    mode=signed places balances by sign; mode=normal_balance places
    them on each account class's normal side.
    """
    service = ReportService(storage)
    try:
        return service.trial_balance(organization_id, mode=mode)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/income-statement", response_model=IncomeStatement)
def income_statement(
    organization_id: int,
    storage: Storage = Depends(get_storage),
):
    service = ReportService(storage)
    try:
        return service.income_statement(organization_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/dashboard", response_model=DashboardSummary)
def dashboard(
    organization_id: int,
    storage: Storage = Depends(get_storage),
):
    """Revenue, expenses, net profit and cash on hand."""
    service = ReportService(storage)
    try:
        return service.dashboard_summary(organization_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
