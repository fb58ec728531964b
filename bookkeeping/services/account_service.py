"""
Account service — the chart of accounts and its balances.

This service owns every account of every organization and is
the only place where an account balance changes. Balances move
through apply_entry_effect, which the LedgerService calls for
each line of a committed entry.
"""

import logging
from datetime import datetime
from decimal import Decimal

from bookkeeping.exceptions import NotFoundError, ValidationError
from bookkeeping.models.account import Account
from bookkeeping.models.enums import AccountClass
from bookkeeping.models.organization import Organization
from bookkeeping.schemas.account import AccountCreate
from bookkeeping.stores.base import Storage

logger = logging.getLogger(__name__)


def parse_account_class(value) -> AccountClass:
    """Turn "Asset", "ASSET" or AccountClass.ASSET into an AccountClass."""
    try:
        return AccountClass(str.lower(value))
    except (TypeError, ValueError):
        allowed = ", ".join(member.value for member in AccountClass)
        raise ValidationError(
            f"Invalid account class '{value}', expected one of: {allowed}"
        ) from None


class AccountService:

    def __init__(self, storage: Storage):
        self.storage = storage

    def _get_organization(self, organization_id: int) -> Organization:
        organization = self.storage.accounts.get_organization(organization_id)
        if not organization:
            raise NotFoundError("Organization", organization_id)
        return organization

    def list_accounts(
        self,
        organization_id: int,
        *,
        account_class: AccountClass | None = None,
        include_inactive: bool = True,
    ) -> list[Account]:
        """
        Return the organization's accounts in the order they were added.

        No filtering happens unless asked for. An unknown organization
        simply has no accounts.
        """
        accounts = self.storage.accounts.list_accounts(organization_id)
        if account_class is not None:
            wanted = parse_account_class(account_class)
            accounts = [a for a in accounts if a.account_class == wanted]
        if not include_inactive:
            accounts = [a for a in accounts if a.is_active]
        return accounts

    def get_account(self, account_id: int) -> Account:
        account = self.storage.accounts.get_account(account_id)
        if not account:
            raise NotFoundError("Account", account_id)
        return account

    def create_account(
        self, organization_id: int, request: AccountCreate
    ) -> Account:
        """
        Add an account to an organization's chart of accounts.

        The balance starts at the opening balance (zero by default).
        Codes are unique within an organization, and a parent must be
        an account of the same organization.
        """
        account_class = parse_account_class(request.account_class)

        with self.storage.lock_organization(organization_id), \
                self.storage.atomic():
            self._get_organization(organization_id)

            existing = self.storage.accounts.find_account_by_code(
                organization_id, request.code
            )
            if existing:
                raise ValidationError(
                    f"Account with code '{request.code}' already exists"
                )

            if request.parent_id is not None:
                parent = self.storage.accounts.get_account(request.parent_id)
                if not parent or parent.organization_id != organization_id:
                    raise NotFoundError("Parent account", request.parent_id)

            opening_balance = request.opening_balance or Decimal("0")
            account = Account(
                organization_id=organization_id,
                code=request.code,
                name=request.name,
                account_class=account_class,
                parent_id=request.parent_id,
                is_active=True,
                opening_balance=opening_balance,
                balance=opening_balance,
                created_at=datetime.utcnow(),
            )
            self.storage.accounts.add_account(account)

        logger.info(
            "Created account %s (%s) for organization %s",
            account.code,
            account_class.value,
            organization_id,
        )
        return account

    def apply_entry_effect(
        self, account_id: int, debit: Decimal, credit: Decimal
    ) -> Account:
        """
        Move an account's balance by one journal line.

        For ASSET and EXPENSE accounts: balance += debit - credit
        For LIABILITY, EQUITY, and REVENUE: balance += credit - debit

        Called by the LedgerService inside its atomic unit. Nothing
        else should change a balance.
        """
        account = self.get_account(account_id)
        account.balance = account.balance + account.signed_effect(
            debit, credit
        )
        self.storage.accounts.save_account(account)
        return account

    def deactivate_account(self, account_id: int) -> Account:
        """
        Deactivate an account.

        Accounts are never deleted. An inactive account keeps its
        balance and history but accepts no new entries. Runs under the
        organization's write lock, like commits.
        """
        organization_id = self.get_account(account_id).organization_id

        with self.storage.lock_organization(organization_id), \
                self.storage.atomic():
            account = self.get_account(account_id)
            account.is_active = False
            self.storage.accounts.save_account(account)

        logger.info("Deactivated account %s", account.code)
        return account

    def derive_balance(self, account_id: int) -> Decimal:
        """
        Recompute an account's balance from its history.

        opening_balance plus the signed effect of every committed
        line that references the account. Always equal to the stored
        balance; a difference means the ledger is corrupt.
        """
        account = self.get_account(account_id)
        balance = Decimal(account.opening_balance)
        for detail in self.storage.entries.list_details_for_account(
            account_id
        ):
            balance += account.signed_effect(
                Decimal(detail.debit), Decimal(detail.credit)
            )
        return balance
