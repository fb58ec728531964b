"""
Pydantic schemas for the chart of accounts.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from bookkeeping.models.enums import AccountClass


class AccountCreate(BaseModel):
    """
    Request to add an account to an organization's chart.

    account_class also accepts any string; the AccountService checks
    it, so an unknown class is reported as a ledger ValidationError
    rather than a schema error.
    """
    code: str = Field(min_length=1, max_length=20)
    name: str = Field(min_length=1, max_length=200)
    account_class: AccountClass | str
    parent_id: int | None = None
    opening_balance: Decimal = Field(default=Decimal("0"), decimal_places=4)


class AccountResponse(BaseModel):
    id: int
    organization_id: int
    code: str
    name: str
    account_class: AccountClass
    parent_id: int | None
    is_active: bool
    opening_balance: Decimal
    balance: Decimal
    created_at: datetime

    model_config = {"from_attributes": True}
