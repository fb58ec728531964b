"""
Builders shared by the service and API tests.
"""

from datetime import date
from decimal import Decimal

from bookkeeping.schemas.account import AccountCreate
from bookkeeping.schemas.journal import JournalEntryCreate, JournalLineCreate
from bookkeeping.schemas.organization import OrganizationCreate
from bookkeeping.services.account_service import AccountService
from bookkeeping.services.organization_service import OrganizationService

ENTRY_DATE = date(2026, 1, 15)


# --- Helpers to reduce repetition ---

def make_organization(storage, name="Acme Trading", **kwargs):
    """Create an organization and return it."""
    return OrganizationService(storage).create_organization(
        OrganizationCreate(name=name, **kwargs)
    )


def make_account(
    storage, organization_id, code, account_class,
    name=None, opening_balance="0", parent_id=None,
):
    """Create an account and return it."""
    return AccountService(storage).create_account(
        organization_id,
        AccountCreate(
            code=code,
            name=name or f"Account {code}",
            account_class=account_class,
            opening_balance=Decimal(opening_balance),
            parent_id=parent_id,
        ),
    )


def debit(account, amount, description=None):
    return JournalLineCreate(
        account_id=account.id, debit=Decimal(amount), description=description
    )


def credit(account, amount, description=None):
    return JournalLineCreate(
        account_id=account.id, credit=Decimal(amount), description=description
    )


def entry(*lines, description="Test entry", reference=None, created_by=None):
    """Build a journal entry request from lines."""
    return JournalEntryCreate(
        description=description,
        entry_date=ENTRY_DATE,
        reference=reference,
        created_by=created_by,
        lines=list(lines),
    )
