"""
Pydantic schemas for journal entries.

These define the API contract — what data comes in,
what data goes out. They are separate from the database
models because the API shape and the storage shape
are often different.
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator


# --- Request Schemas ---

class JournalLineCreate(BaseModel):
    """
    One line of a journal entry: a debit or a credit to one account.

    A line is either a debit or a credit contribution, never both,
    and never neither.
    """
    account_id: int
    debit: Decimal = Field(default=Decimal("0"), ge=0, decimal_places=4)
    credit: Decimal = Field(default=Decimal("0"), ge=0, decimal_places=4)
    description: str | None = Field(default=None, max_length=255)

    @model_validator(mode="after")
    def exactly_one_side(self) -> "JournalLineCreate":
        if self.debit and self.credit:
            raise ValueError("a line cannot carry both a debit and a credit")
        if not self.debit and not self.credit:
            raise ValueError("a line must carry a debit or a credit amount")
        return self


class JournalEntryCreate(BaseModel):
    """
    A complete journal entry — a group of lines that must balance.

    The line count and the balance are checked by the LedgerService
    so that they surface as ledger errors, not schema errors.
    """
    description: str = Field(min_length=1)
    entry_date: date
    reference: str | None = Field(default=None, max_length=255)
    created_by: str | None = Field(default=None, max_length=100)
    lines: list[JournalLineCreate] = Field(default_factory=list)


class QuickEntryCreate(BaseModel):
    """
    A two-line entry described by an amount instead of lines.

    Used by command-style front ends. The account codes default
    to the configured cash, sales and expense accounts.
    """
    amount: Decimal = Field(decimal_places=4)
    description: str = Field(min_length=1)
    entry_date: date | None = None
    reference: str | None = Field(default=None, max_length=255)
    created_by: str | None = Field(default=None, max_length=100)
    cash_account_code: str | None = None
    counter_account_code: str | None = None


# --- Response Schemas ---

class JournalEntryDetailResponse(BaseModel):
    id: int
    account_id: int
    debit: Decimal
    credit: Decimal
    description: str | None

    model_config = {"from_attributes": True}


class JournalEntryResponse(BaseModel):
    id: int
    organization_id: int
    entry_number: str
    description: str
    entry_date: date
    reference: str | None
    total_amount: Decimal
    created_by: str | None
    created_at: datetime
    details: list[JournalEntryDetailResponse]

    model_config = {"from_attributes": True}
