"""
Ledger service — the core of the bookkeeping system.

This service enforces the fundamental rules:
1. Every entry has at least one debit line and one credit line
2. Every line references an active account of the same organization
3. Every entry must balance (debits = credits)
4. Entries are immutable (append-only)

No other service writes journal entries. All balance changes
go through commit_entry, which applies them through the
AccountService inside one atomic unit.
"""

import logging
from datetime import datetime
from decimal import Decimal

from bookkeeping.config import get_settings
from bookkeeping.exceptions import (
    NotFoundError,
    UnbalancedEntryError,
    ValidationError,
)
from bookkeeping.models.account import Account
from bookkeeping.models.journal_entry import JournalEntry, JournalEntryDetail
from bookkeeping.schemas.journal import JournalEntryCreate
from bookkeeping.services.account_service import AccountService
from bookkeeping.stores.base import Storage

logger = logging.getLogger(__name__)

ENTRY_NUMBER_PREFIX = "JE"


def format_entry_number(created_at: datetime, sequence: int) -> str:
    """
    Build a human-readable entry number, e.g. JE-20260117093015-000042.

    The timestamp orders numbers in time; the per-organization
    sequence makes them unique even within the same second.
    """
    return (
        f"{ENTRY_NUMBER_PREFIX}-{created_at:%Y%m%d%H%M%S}-{sequence:06d}"
    )


class LedgerService:
    """
    All journal-entry operations pass through this service.

    The service takes a Storage as a constructor argument, so the
    same rules run against the in-memory store in tests and the
    relational store in production.
    """

    def __init__(self, storage: Storage, balance_tolerance: Decimal | None = None):
        self.storage = storage
        self.account_service = AccountService(storage)
        if balance_tolerance is None:
            balance_tolerance = get_settings().BALANCE_TOLERANCE
        self.balance_tolerance = balance_tolerance

    def commit_entry(
        self, organization_id: int, request: JournalEntryCreate
    ) -> JournalEntry:
        """
        Validate and commit a journal entry as a single unit.

        This is the most critical method in the entire system.
        Checks run in this order, and any failure leaves the ledger
        untouched:
        - there are at least two lines, with a debit and a credit side
        - the organization exists
        - every account exists, belongs to the organization and is active
        - total debits equal total credits

        Then, holding the organization's write lock, the entry number is
        allocated, the entry and its lines are stored, and every line is
        applied to its account's balance. If any of that fails, all of it
        is undone.
        """
        lines = request.lines

        # --- Shape of the entry ---
        if (
            len(lines) < 2
            or not any(line.debit for line in lines)
            or not any(line.credit for line in lines)
        ):
            raise ValidationError(
                "at least one debit and one credit account required"
            )

        with self.storage.lock_organization(organization_id), \
                self.storage.atomic():

            organization = self.storage.accounts.get_organization(
                organization_id
            )
            if not organization:
                raise NotFoundError("Organization", organization_id)

            # --- Resolve accounts ---
            self._resolve_accounts(
                organization_id, {line.account_id for line in lines}
            )

            # --- Enforce balance rule ---
            total_debit = sum((line.debit for line in lines), Decimal("0"))
            total_credit = sum((line.credit for line in lines), Decimal("0"))

            if abs(total_debit - total_credit) > self.balance_tolerance:
                logger.warning(
                    "Rejected unbalanced entry for organization %s: "
                    "debits=%s credits=%s",
                    organization_id,
                    total_debit,
                    total_credit,
                )
                raise UnbalancedEntryError(total_debit, total_credit)

            # --- Commit ---
            created_at = datetime.utcnow()
            sequence = self.storage.accounts.allocate_entry_sequence(
                organization_id
            )

            entry = JournalEntry(
                organization_id=organization_id,
                entry_number=format_entry_number(created_at, sequence),
                description=request.description,
                entry_date=request.entry_date,
                reference=request.reference,
                total_amount=total_debit,
                created_by=request.created_by,
                created_at=created_at,
                details=[
                    JournalEntryDetail(
                        account_id=line.account_id,
                        debit=line.debit,
                        credit=line.credit,
                        description=line.description,
                    )
                    for line in lines
                ],
            )
            self.storage.entries.add_entry(entry)

            for line in lines:
                self.account_service.apply_entry_effect(
                    line.account_id, line.debit, line.credit
                )

        logger.info(
            "Committed entry %s for organization %s: %d lines, total %s",
            entry.entry_number,
            organization_id,
            len(lines),
            entry.total_amount,
        )
        return entry

    def _resolve_accounts(
        self, organization_id: int, account_ids: set[int]
    ) -> dict[int, Account]:
        """Load the referenced accounts, checking ownership and status."""
        accounts_by_id = {}
        for account_id in sorted(account_ids):
            account = self.storage.accounts.get_account(account_id)
            # An account of another organization is reported as missing
            if not account or account.organization_id != organization_id:
                raise NotFoundError("Account", account_id)
            if not account.is_active:
                raise ValidationError(f"Account {account.code} is not active")
            accounts_by_id[account_id] = account
        return accounts_by_id

    def list_journal_entries(self, organization_id: int) -> list[JournalEntry]:
        """Return all committed entries of an organization, oldest first."""
        return self.storage.entries.list_entries(organization_id)

    def get_journal_entry(self, entry_id: int) -> JournalEntry:
        entry = self.storage.entries.get_entry(entry_id)
        if not entry:
            raise NotFoundError("Journal entry", entry_id)
        return entry
