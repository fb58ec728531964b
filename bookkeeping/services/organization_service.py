"""
Organization service — tenants and their starting chart of accounts.
"""

import logging
from datetime import datetime

from bookkeeping.config import get_settings
from bookkeeping.exceptions import NotFoundError
from bookkeeping.models.organization import Organization
from bookkeeping.schemas.account import AccountCreate
from bookkeeping.schemas.organization import OrganizationCreate
from bookkeeping.services.account_service import AccountService
from bookkeeping.stores.base import Storage

logger = logging.getLogger(__name__)


# (code, name, class, parent code)
# Parents are listed before their children.
DEFAULT_CHART_OF_ACCOUNTS = [
    ("1000", "Assets", "asset", None),
    ("1100", "Current Assets", "asset", "1000"),
    ("1110", "Cash and Cash Equivalents", "asset", "1100"),
    ("1111", "Main Cash Box", "asset", "1110"),
    ("1112", "Bank Account", "asset", "1110"),
    ("1200", "Accounts Receivable", "asset", "1100"),
    ("2000", "Liabilities", "liability", None),
    ("2100", "Accounts Payable", "liability", "2000"),
    ("3000", "Equity", "equity", None),
    ("4000", "Revenue", "revenue", None),
    ("4100", "Sales Revenue", "revenue", "4000"),
    ("5000", "Expenses", "expense", None),
    ("5100", "Administrative Expenses", "expense", "5000"),
]


class OrganizationService:

    def __init__(self, storage: Storage):
        self.storage = storage
        self.account_service = AccountService(storage)

    def create_organization(self, request: OrganizationCreate) -> Organization:
        """
        Create an organization, optionally with the default chart.

        The organization and its seeded accounts are created in one
        unit: either all of them exist afterwards or none do.
        """
        currency = request.currency or get_settings().DEFAULT_CURRENCY

        with self.storage.atomic():
            organization = Organization(
                name=request.name,
                currency=currency.upper(),
                created_at=datetime.utcnow(),
                last_entry_sequence=0,
            )
            self.storage.accounts.add_organization(organization)

            if request.seed_default_chart:
                self._seed_default_chart(organization.id)

        logger.info(
            "Created organization %s (%s)", organization.id, organization.name
        )
        return organization

    def _seed_default_chart(self, organization_id: int) -> None:
        ids_by_code = {}
        for code, name, account_class, parent_code in DEFAULT_CHART_OF_ACCOUNTS:
            account = self.account_service.create_account(
                organization_id,
                AccountCreate(
                    code=code,
                    name=name,
                    account_class=account_class,
                    parent_id=ids_by_code.get(parent_code),
                ),
            )
            ids_by_code[code] = account.id

    def get_organization(self, organization_id: int) -> Organization:
        organization = self.storage.accounts.get_organization(organization_id)
        if not organization:
            raise NotFoundError("Organization", organization_id)
        return organization
