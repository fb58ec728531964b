"""
Quick entry service — sales and expenses from a single amount.

Command-style front ends (chat bots, voice assistants) know an
amount and a description, not journal lines. This service turns
that into a balanced two-line entry and commits it through the
LedgerService like any other entry.

Accounting:
    Sale:    DEBIT  Cash   (asset increases)
             CREDIT Sales  (revenue increases)
    Expense: DEBIT  Expense (expense increases)
             CREDIT Cash    (asset decreases)
"""

from datetime import date
from decimal import Decimal

from bookkeeping.config import get_settings
from bookkeeping.exceptions import NotFoundError, ValidationError
from bookkeeping.models.account import Account
from bookkeeping.models.journal_entry import JournalEntry
from bookkeeping.schemas.journal import (
    JournalEntryCreate,
    JournalLineCreate,
    QuickEntryCreate,
)
from bookkeeping.services.ledger_service import LedgerService
from bookkeeping.stores.base import Storage

DEFAULT_REFERENCE = "Quick entry"


class QuickEntryService:

    def __init__(self, storage: Storage):
        self.storage = storage
        self.ledger_service = LedgerService(storage)

    def _account_by_code(self, organization_id: int, code: str) -> Account:
        account = self.storage.accounts.find_account_by_code(
            organization_id, code
        )
        if not account:
            raise NotFoundError("Account with code", code)
        return account

    def _validate_amount(self, amount: Decimal) -> None:
        if amount <= 0:
            raise ValidationError("amount must be positive")

    def record_sale(
        self, organization_id: int, request: QuickEntryCreate
    ) -> JournalEntry:
        """Record cash received for a sale."""
        self._validate_amount(request.amount)
        settings = get_settings()

        cash = self._account_by_code(
            organization_id, request.cash_account_code or settings.CASH_ACCOUNT_CODE
        )
        sales = self._account_by_code(
            organization_id,
            request.counter_account_code or settings.SALES_ACCOUNT_CODE,
        )

        return self._commit(
            organization_id,
            request,
            debit_line=JournalLineCreate(
                account_id=cash.id,
                debit=request.amount,
                description="Cash from sales",
            ),
            credit_line=JournalLineCreate(
                account_id=sales.id,
                credit=request.amount,
                description="Sales revenue",
            ),
        )

    def record_expense(
        self, organization_id: int, request: QuickEntryCreate
    ) -> JournalEntry:
        """Record an expense paid in cash."""
        self._validate_amount(request.amount)
        settings = get_settings()

        expense = self._account_by_code(
            organization_id,
            request.counter_account_code or settings.EXPENSE_ACCOUNT_CODE,
        )
        cash = self._account_by_code(
            organization_id, request.cash_account_code or settings.CASH_ACCOUNT_CODE
        )

        return self._commit(
            organization_id,
            request,
            debit_line=JournalLineCreate(
                account_id=expense.id,
                debit=request.amount,
                description="Expenses",
            ),
            credit_line=JournalLineCreate(
                account_id=cash.id,
                credit=request.amount,
                description="Cash payment",
            ),
        )

    def _commit(
        self,
        organization_id: int,
        request: QuickEntryCreate,
        debit_line: JournalLineCreate,
        credit_line: JournalLineCreate,
    ) -> JournalEntry:
        return self.ledger_service.commit_entry(
            organization_id,
            JournalEntryCreate(
                description=request.description,
                entry_date=request.entry_date or date.today(),
                reference=request.reference or DEFAULT_REFERENCE,
                created_by=request.created_by,
                lines=[debit_line, credit_line],
            ),
        )
